"""Defines the chain connection configuration from env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from eth_typing import URI

from .base.transport import DEFAULT_POLL_INTERVAL
from .contracts import DEFAULT_CHAIN_ID


@dataclass
class StoryConfig:
    """The configuration dataclass for connecting to the protocol's chain."""

    rpc_uri: URI | str = URI("https://testnet.storyrpc.io")
    """The uri to the ethereum node."""
    chain_id: int = DEFAULT_CHAIN_ID
    """The id of the chain the contracts are deployed on."""
    private_key: str | None = None
    """The hex private key of the signing account. If None, clients are read-only."""
    artifacts_uri: URI | str | None = None
    """The uri of an artifacts server with the addresses of a custom deployment. If None, use the built-in addresses."""
    poll_interval: float = DEFAULT_POLL_INTERVAL
    """Seconds between polls for new event logs."""

    def __post_init__(self):
        if isinstance(self.rpc_uri, str):
            self.rpc_uri = URI(self.rpc_uri)
        if isinstance(self.artifacts_uri, str):
            self.artifacts_uri = URI(self.artifacts_uri)
        # Values read from the environment are strings
        self.chain_id = int(self.chain_id)
        self.poll_interval = float(self.poll_interval)


def build_story_config(dotenv_file: str = "story.env") -> StoryConfig:
    """Build a story config that looks for environmental variables.
    If env var exists, use that, otherwise, default.

    Arguments
    ---------
    dotenv_file: str, optional
        The path location of the dotenv file to load from.
        Defaults to "story.env".

    Returns
    -------
    StoryConfig
        Config settings required to connect to the chain
    """
    # Look for and load local config if it exists
    if os.path.exists(dotenv_file):
        load_dotenv(dotenv_file)

    rpc_uri = os.getenv("RPC_URI")
    chain_id = os.getenv("CHAIN_ID")
    private_key = os.getenv("WALLET_PRIVATE_KEY")
    artifacts_uri = os.getenv("ARTIFACTS_URI")
    poll_interval = os.getenv("POLL_INTERVAL")

    arg_dict = {}
    if rpc_uri is not None:
        arg_dict["rpc_uri"] = rpc_uri
    if chain_id is not None:
        arg_dict["chain_id"] = chain_id
    if private_key is not None:
        arg_dict["private_key"] = private_key
    if artifacts_uri is not None:
        arg_dict["artifacts_uri"] = artifacts_uri
    if poll_interval is not None:
        arg_dict["poll_interval"] = poll_interval
    return StoryConfig(**arg_dict)
