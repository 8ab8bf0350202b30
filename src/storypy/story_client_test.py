"""Tests for story_client.py"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from eth_account import Account
from eth_utils import to_checksum_address

from .base.addresses import UNRESOLVED_ADDRESS, ZERO_ADDRESS
from .clients import ContractClient
from .contracts import (
    DISPUTE_MODULE_CONFIG,
    ROYALTY_MODULE_CONFIG,
    DisputeModuleClient,
    DisputeModuleReadOnlyClient,
    LicenseTokenClient,
)
from .resources import IPAccountClient, RoyaltyClient
from .story_client import StoryClient
from .story_config import StoryConfig

PRIVATE_KEY = "0x" + "01" * 32


def test_read_only_without_private_key():
    """Without a key every contract gets a read-only client."""
    story_client = StoryClient(StoryConfig(), web3=MagicMock())
    assert story_client.wallet is None
    assert isinstance(story_client.dispute_module, DisputeModuleReadOnlyClient)
    assert not isinstance(story_client.dispute_module, ContractClient)
    assert story_client.dispute_module.address == DISPUTE_MODULE_CONFIG.address
    assert len(story_client.contract_clients) == 16


def test_write_clients_with_private_key():
    """With a key every contract gets a write client sharing one wallet."""
    story_client = StoryClient(StoryConfig(private_key=PRIVATE_KEY), web3=MagicMock())
    assert story_client.wallet is not None
    assert story_client.wallet.account == Account.from_key(PRIVATE_KEY).address
    assert isinstance(story_client.dispute_module, DisputeModuleClient)
    assert isinstance(story_client.license_token, LicenseTokenClient)
    assert story_client.license_token.wallet is story_client.wallet
    assert story_client.dispute.wallet is story_client.wallet
    assert story_client.ip_account.wallet is story_client.wallet
    assert story_client.royalty.royalty_module_client.wallet is story_client.wallet


def test_contract_attribute_names():
    """Contracts are exposed under their snake case names."""
    story_client = StoryClient(StoryConfig(), web3=MagicMock())
    for attribute in (
        "access_controller",
        "ip_account_impl",
        "ip_asset_registry",
        "ip_royalty_vault_impl",
        "pi_license_template",
        "royalty_policy_lap",
        "spg",
        "spgnft_beacon",
        "spgnft_impl",
    ):
        assert getattr(story_client, attribute).address != ZERO_ADDRESS


def test_unknown_chain():
    """Chains without a deployment resolve to "0x", never to the zero address."""
    story_client = StoryClient(StoryConfig(chain_id=1), web3=MagicMock())
    assert story_client.dispute_module.address == UNRESOLVED_ADDRESS
    assert story_client.dispute.dispute_module_client.address == UNRESOLVED_ADDRESS
    assert story_client.royalty.ip_asset_registry_client.address == UNRESOLVED_ADDRESS


def test_resource_clients():
    """The resource clients share the transport and the contract addresses."""
    story_client = StoryClient(StoryConfig(), web3=MagicMock())
    assert isinstance(story_client.ip_account, IPAccountClient)
    assert isinstance(story_client.royalty, RoyaltyClient)
    assert story_client.royalty.transport is story_client.transport
    assert story_client.royalty.royalty_module_client.address == ROYALTY_MODULE_CONFIG.address


def test_artifacts_override():
    """Addresses from an artifacts server replace the built-in ones."""
    custom_address = to_checksum_address("0x" + "d1" * 20)
    with patch(
        "storypy.story_client.fetch_deployment_addresses_from_uri", return_value={"DisputeModule": custom_address}
    ) as fetch:
        story_client = StoryClient(StoryConfig(artifacts_uri="http://localhost:8080"), web3=MagicMock())
    fetch.assert_called_once_with("http://localhost:8080")
    assert story_client.dispute_module.address == custom_address
    assert story_client.dispute.dispute_module_client.address == custom_address
    # Contracts missing from the artifacts keep the built-in address
    assert story_client.license_token.address == LicenseTokenClient(MagicMock(chain_id=1513), None).address


def test_new():
    """The classmethod constructor connects over http without any rpc calls."""
    story_client = StoryClient.new(StoryConfig(rpc_uri="http://localhost:8545"))
    assert isinstance(story_client, StoryClient)
    assert story_client.transport.web3 is story_client.web3
