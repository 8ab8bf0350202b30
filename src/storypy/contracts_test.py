"""Tests for the generated contract clients."""

from __future__ import annotations

import asyncio

import pytest
from eth_utils import is_checksum_address

from storypy import contracts
from storypy.base.addresses import UNRESOLVED_ADDRESS, ZERO_ADDRESS
from storypy.clients import ContractClient, ContractEventClient, ContractReadOnlyClient
from storypy.test_fixtures import MockTransport


@pytest.mark.parametrize("contract_name", list(contracts.CONTRACT_CLIENTS))
def test_generated_classes(contract_name):
    """Every contract exports an event, read-only and write client."""
    event_client, read_only_client, client = contracts.CONTRACT_CLIENTS[contract_name]
    assert event_client is getattr(contracts, f"{contract_name}EventClient")
    assert read_only_client is getattr(contracts, f"{contract_name}ReadOnlyClient")
    assert client is getattr(contracts, f"{contract_name}Client")
    assert issubclass(event_client, ContractEventClient)
    assert read_only_client is not None and issubclass(read_only_client, ContractReadOnlyClient)
    assert issubclass(client, read_only_client)
    assert issubclass(client, ContractClient)
    assert client.contract_name == contract_name


@pytest.mark.parametrize("contract_name", list(contracts.CONTRACT_CLIENTS))
def test_deployed_address(contract_name):
    """The built-in address table resolves to a deployed contract."""
    client = contracts.CONTRACT_CLIENTS[contract_name].client
    address = client(MockTransport(), None).address
    assert is_checksum_address(address)
    assert address != ZERO_ADDRESS


def test_unknown_chain():
    """Clients on a chain without a deployment point at "0x"."""
    assert contracts.DisputeModuleReadOnlyClient(MockTransport(chain_id=1)).address == UNRESOLVED_ADDRESS


def test_configs():
    """Configs carry the resolved address and the parsed ABI."""
    config = contracts.DISPUTE_MODULE_CONFIG
    assert config.address == contracts.DisputeModuleClient(MockTransport(), None).address
    assert config.abi is contracts.DisputeModuleClient.abi
    assert config.abi.raw == contracts.DISPUTE_MODULE_ABI


def test_dispute_module_methods():
    """The dispute module has its reads, writes and events."""
    client = contracts.DisputeModuleClient
    for method_name in (
        "base_arbitration_policy",
        "dispute_counter",
        "disputes",
        "is_whitelisted_dispute_tag",
        "raise_dispute",
        "raise_dispute_encode",
        "cancel_dispute",
        "resolve_dispute",
        "watch_dispute_raised_event",
        "parse_tx_dispute_raised_event",
    ):
        assert callable(getattr(client, method_name))
    assert not hasattr(contracts.DisputeModuleReadOnlyClient, "raise_dispute")


def test_license_token_overloads():
    """Overloaded writes get numbered method names and are reachable by signature."""
    client = contracts.LicenseTokenClient(MockTransport(), None)
    assert callable(client.safe_transfer_from)
    assert callable(client.safe_transfer_from2)
    with_data = client.overload("safeTransferFrom(address,address,uint256,bytes)", encode=True)
    assert with_data.__name__ == "safe_transfer_from2_encode"
    sender = "0x" + "01" * 20
    receiver = "0x" + "02" * 20
    encoded = with_data({"from": sender, "to": receiver, "tokenId": 1, "data": b""})
    assert encoded.data.startswith("0xb88d4fde")


def test_unnamed_outputs_are_keyed_by_position():
    """Reads with several unnamed outputs return value0, value1, ..."""
    transport = MockTransport()
    ip_id = "0x" + "11" * 20
    transport.read_results["getRoyaltyData"] = (True, ip_id, 10, [], [])
    client = contracts.RoyaltyPolicyLAPReadOnlyClient(transport)
    result = asyncio.run(client.get_royalty_data(ipId=ip_id))
    assert result == {"value0": True, "value1": ip_id, "value2": 10, "value3": [], "value4": []}


def test_snake_case_names():
    """Acronyms in contract function names stay together."""
    assert callable(contracts.SPGClient.get_spgnft_beacon)
    assert callable(contracts.SPGClient.register_ip_and_attach_pil_terms)
    assert callable(contracts.SpgnftImplClient.mint_by_spg)
    assert callable(contracts.RoyaltyPolicyLAPClient.max_ancestors)
