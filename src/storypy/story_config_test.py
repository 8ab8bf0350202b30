"""Test for the story_config.py class and functions."""

from __future__ import annotations

import os

import pytest
from eth_typing import URI

from .story_config import StoryConfig, build_story_config

# pylint: disable=redefined-outer-name

ENV_VARS = ("RPC_URI", "CHAIN_ID", "WALLET_PRIVATE_KEY", "ARTIFACTS_URI", "POLL_INTERVAL")
PRIVATE_KEY = "0x" + "01" * 32


@pytest.fixture
def clean_env():
    """Remove the config variables from the environment for the test, restoring them after."""
    # Get the current environment variables before changing them
    saved = {name: os.environ.pop(name) for name in ENV_VARS if name in os.environ}
    yield
    # Drop anything the test set, then reset the environment variables that were set before the test
    for name in ENV_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)


class TestBuildStoryConfig:
    """Tests for story_config.py::build_story_config()."""

    def test_build_story_config_from_env(self, clean_env):
        """Test building the story config from the environment."""
        # pylint: disable=unused-argument
        os.environ["RPC_URI"] = "http://localhost:9999"
        os.environ["CHAIN_ID"] = "31337"
        os.environ["WALLET_PRIVATE_KEY"] = PRIVATE_KEY
        os.environ["ARTIFACTS_URI"] = "http://localhost:8080"
        os.environ["POLL_INTERVAL"] = "0.5"

        story_config = build_story_config("")

        assert story_config.rpc_uri == URI("http://localhost:9999")
        assert story_config.chain_id == 31337
        assert story_config.private_key == PRIVATE_KEY
        assert story_config.artifacts_uri == URI("http://localhost:8080")
        assert story_config.poll_interval == 0.5

    def test_build_story_config_from_env_file(self, clean_env, tmp_path):
        """Test building the story config from an environment file.

        Arguments
        ---------
        clean_env: None
            Fixture that isolates the config environment variables.
        tmp_path: pathlib.Path
            Pytest fixture for a temporary path; it is deleted after the test finishes.
        """
        # pylint: disable=unused-argument
        dotenv_file = tmp_path / "story.env"
        dotenv_file.write_text(
            """
            # Local connection
            RPC_URI="http://localhost:9999"
            CHAIN_ID=31337
            """
        )

        story_config = build_story_config(str(dotenv_file))

        assert story_config.rpc_uri == URI("http://localhost:9999")
        assert story_config.chain_id == 31337
        assert story_config.private_key is None

    def test_build_story_config_defaults(self, clean_env):
        """Test building the story config without any variables set."""
        # pylint: disable=unused-argument
        story_config = build_story_config("")

        assert story_config.rpc_uri == URI("https://testnet.storyrpc.io")
        assert story_config.chain_id == 1513
        assert story_config.private_key is None
        assert story_config.artifacts_uri is None
        assert story_config.poll_interval == 1.0


def test_story_config_casts_strings():
    """String values are cast to the field types."""
    story_config = StoryConfig(rpc_uri="http://localhost:8545", chain_id="1513", poll_interval="2")  # type: ignore
    assert story_config.chain_id == 1513
    assert story_config.poll_interval == 2.0
