"""Tests for the generated contract clients."""

from __future__ import annotations

import asyncio
import inspect
from unittest.mock import MagicMock

import pytest
from eth_abi import encode
from eth_utils import to_checksum_address
from hexbytes import HexBytes
from web3.exceptions import InvalidAddress

from ..base.abi import ContractAbi
from ..base.addresses import UNRESOLVED_ADDRESS, ZERO_ADDRESS
from ..base.codec import encode_function_data
from ..contracts import IPAccountImplClient
from ..test_fixtures import MockTransport, MockWallet, encode_event_log
from .contract_client import (
    ContractClient,
    ContractEventClient,
    ContractReadOnlyClient,
    EncodedTxData,
    build_contract_clients,
)

# we need to use the outer name for fixtures
# pylint: disable=redefined-outer-name

SAMPLE_ADDRESS = to_checksum_address("0x" + "5a" * 20)
IP_ID = to_checksum_address("0x" + "11" * 20)
OTHER = to_checksum_address("0x" + "22" * 20)

SAMPLE_ABI = [
    {
        "type": "function",
        "name": "getAttachedLicenseTerms",
        "inputs": [{"name": "ipId", "type": "address"}, {"name": "index", "type": "uint256"}],
        "outputs": [
            {"name": "licenseTemplate", "type": "address"},
            {"name": "licenseTermsId", "type": "uint256"},
        ],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "name",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "cancelDispute",
        "inputs": [{"name": "disputeId", "type": "uint256"}, {"name": "data", "type": "bytes"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "safeTransferFrom",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "safeTransferFrom",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
            {"name": "data", "type": "bytes"},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "payRoyaltyOnBehalf",
        "inputs": [{"name": "receiverIpId", "type": "address"}],
        "outputs": [],
        "stateMutability": "payable",
    },
    {
        "type": "function",
        "name": "read",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "event",
        "name": "DisputeCancelled",
        "inputs": [
            {"name": "disputeId", "type": "uint256", "indexed": False},
            {"name": "data", "type": "bytes", "indexed": False},
        ],
        "anonymous": False,
    },
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "tokenId", "type": "uint256", "indexed": True},
        ],
        "anonymous": False,
    },
    {
        "type": "event",
        "name": "IPRegistered",
        "inputs": [
            {"name": "ipId", "type": "address", "indexed": True},
            {"name": "name", "type": "string", "indexed": False},
        ],
        "anonymous": False,
    },
]

SAMPLE = build_contract_clients("Sample", SAMPLE_ABI, {1513: SAMPLE_ADDRESS})
SampleEventClient = SAMPLE.event_client
SampleReadOnlyClient = SAMPLE.read_only_client
SampleClient = SAMPLE.client


def _cancelled_log(dispute_id: int, log_index: int = 0) -> dict:
    event = SampleEventClient.abi.get_event("DisputeCancelled")
    return encode_event_log(event, {"disputeId": dispute_id, "data": b""}, SAMPLE_ADDRESS, log_index=log_index)


def _transfer_log(token_id: int) -> dict:
    event = SampleEventClient.abi.get_event("Transfer")
    return encode_event_log(event, {"from": IP_ID, "to": OTHER, "tokenId": token_id}, SAMPLE_ADDRESS)


def _registered_log(name: str, log_index: int = 0) -> dict:
    event = SampleEventClient.abi.get_event("IPRegistered")
    return encode_event_log(event, {"ipId": IP_ID, "name": name}, SAMPLE_ADDRESS, log_index=log_index)


class TestGeneratedClasses:
    """Tests for the classes build_contract_clients generates."""

    def test_class_hierarchy(self):
        """Write clients extend read-only clients, which extend event clients."""
        assert SampleEventClient.__name__ == "SampleEventClient"
        assert SampleReadOnlyClient is not None
        assert issubclass(SampleReadOnlyClient, SampleEventClient)
        assert issubclass(SampleReadOnlyClient, ContractReadOnlyClient)
        assert issubclass(SampleClient, SampleReadOnlyClient)
        assert issubclass(SampleClient, ContractClient)
        assert issubclass(SampleEventClient, ContractEventClient)

    def test_generated_methods(self):
        """Each ABI entry gets a method on the matching client."""
        assert hasattr(SampleEventClient, "watch_dispute_cancelled_event")
        assert hasattr(SampleEventClient, "parse_tx_transfer_event")
        assert inspect.iscoroutinefunction(SampleReadOnlyClient.get_attached_license_terms)
        assert not hasattr(SampleReadOnlyClient, "cancel_dispute")
        assert inspect.iscoroutinefunction(SampleClient.cancel_dispute)
        assert hasattr(SampleClient, "cancel_dispute_encode")
        assert hasattr(SampleClient, "safe_transfer_from")
        assert hasattr(SampleClient, "safe_transfer_from2_encode")
        assert SampleClient.cancel_dispute.__qualname__ == "SampleClient.cancel_dispute"

    def test_reserved_names(self):
        """ABI names that clash with client methods get a trailing underscore."""
        assert inspect.iscoroutinefunction(SampleReadOnlyClient.read_)
        assert SampleReadOnlyClient.read is ContractReadOnlyClient.read

    def test_reserved_names_for_parsed_abi(self):
        """Reserved names apply when the abi is passed already parsed."""
        clients = build_contract_clients("Parsed", ContractAbi(SAMPLE_ABI), {})
        assert clients.read_only_client is not None
        assert clients.read_only_client.read is ContractReadOnlyClient.read
        assert inspect.iscoroutinefunction(clients.read_only_client.read_)
        assert clients.client.abi.method_names["read()"] == "read_"

    def test_no_read_functions(self):
        """Contracts without reads have no read-only client."""
        clients = build_contract_clients("Beacon", [SAMPLE_ABI[2]], {})
        assert clients.read_only_client is None
        assert issubclass(clients.client, clients.event_client)


class TestAddressResolution:
    """Tests for default addresses."""

    def test_default_address(self, mock_transport):
        """Clients use the deployment on the transport's chain."""
        assert SampleEventClient(mock_transport).address == SAMPLE_ADDRESS

    def test_unknown_chain(self):
        """Unknown chains resolve to "0x" without raising."""
        address = SampleEventClient(MockTransport(chain_id=1)).address
        assert address == UNRESOLVED_ADDRESS == "0x"
        assert address != ZERO_ADDRESS

    def test_explicit_unresolved_address(self, mock_transport):
        """An explicit "0x" is kept rather than rejected by checksumming."""
        assert SampleEventClient(mock_transport, "0x").address == "0x"

    def test_unknown_chain_write_never_sends(self, mock_wallet):
        """Writes on an unconfigured chain fail with an address error before reaching the wallet."""
        client = SampleClient(MockTransport(chain_id=1), mock_wallet)
        with pytest.raises(InvalidAddress):
            asyncio.run(client.cancel_dispute(disputeId=1, data=b""))
        assert not mock_wallet.sent

    def test_explicit_address(self, mock_transport, mock_wallet):
        """An explicit address wins over the table."""
        assert SampleClient(mock_transport, mock_wallet, OTHER.lower()).address == OTHER


class TestReadOnlyClient:
    """Tests for reads."""

    def test_read_reshapes_outputs(self, mock_transport):
        """Several outputs come back keyed by their ABI names, in order."""
        mock_transport.read_results["getAttachedLicenseTerms"] = (OTHER, 5)
        client = SampleReadOnlyClient(mock_transport)
        result = asyncio.run(client.get_attached_license_terms({"ipId": IP_ID, "index": 0}))
        assert result == {"licenseTemplate": OTHER, "licenseTermsId": 5}
        assert list(result) == ["licenseTemplate", "licenseTermsId"]
        assert mock_transport.calls == [
            ("read_contract", SAMPLE_ADDRESS, "getAttachedLicenseTerms(address,uint256)", (IP_ID, 0))
        ]

    def test_read_single_output(self, mock_transport):
        """A single output is returned as is."""
        mock_transport.read_results["name"] = "Sample"
        client = SampleReadOnlyClient(mock_transport)
        assert asyncio.run(client.name()) == "Sample"
        assert asyncio.run(client.read("name")) == "Sample"

    def test_read_errors_propagate(self, mock_transport):
        """Transport errors are not translated."""
        client = SampleReadOnlyClient(mock_transport)
        with pytest.raises(KeyError):
            asyncio.run(client.name())


class TestClient:
    """Tests for simulate-then-send writes."""

    def test_write_sends_the_simulated_request(self, mock_transport, mock_wallet):
        """A passing simulation is broadcast exactly once."""
        client = SampleClient(mock_transport, mock_wallet)
        tx_hash = asyncio.run(client.cancel_dispute(disputeId=1, data=b""))
        assert tx_hash == mock_wallet.tx_hash
        assert len(mock_wallet.sent) == 1
        request = mock_wallet.sent[0]
        assert request.to == SAMPLE_ADDRESS
        assert request.account == mock_wallet.account
        assert request.data == client.cancel_dispute_encode(disputeId=1, data=b"").data

    def test_failed_simulation_never_sends(self, mock_transport, mock_wallet):
        """The simulation error propagates and the wallet is not called."""
        error = ValueError("execution reverted: NotDisputeInitiator")
        mock_transport.simulate_error = error
        client = SampleClient(mock_transport, mock_wallet)
        with pytest.raises(ValueError) as exc_info:
            asyncio.run(client.cancel_dispute({"disputeId": 1, "data": b""}))
        assert exc_info.value is error
        assert not mock_wallet.sent

    def test_payable_value(self, mock_transport, mock_wallet):
        """tx_value is passed through to the simulation and the request."""
        client = SampleClient(mock_transport, mock_wallet)
        asyncio.run(client.pay_royalty_on_behalf(receiverIpId=IP_ID, tx_value=100))
        assert mock_wallet.sent[0].value == 100
        asyncio.run(client.write("payRoyaltyOnBehalf", {"receiverIpId": IP_ID}, tx_value=5))
        assert mock_wallet.sent[1].value == 5

    def test_inputs_named_value(self, mock_transport, mock_wallet):
        """An ABI input named `value` is a call argument, not the transaction value."""
        client = IPAccountImplClient(mock_transport, mock_wallet, SAMPLE_ADDRESS)
        asyncio.run(client.execute(to=OTHER, value=0, data=b""))
        asyncio.run(client.overload("execute(address,uint256,bytes)")(to=OTHER, value=7, data=b"\x01", tx_value=7))
        first, second = mock_wallet.sent
        assert first.args == (OTHER, 0, b"")
        assert first.value is None
        assert second.args == (OTHER, 7, b"\x01")
        assert second.value == 7
        assert first.data == client.execute_encode(to=OTHER, value=0, data=b"").data

    def test_overloads(self, mock_transport, mock_wallet):
        """Each overload is reachable by suffix and by signature."""
        client = SampleClient(mock_transport, mock_wallet)
        short = client.safe_transfer_from_encode({"from": IP_ID, "to": OTHER, "tokenId": 1})
        long = client.safe_transfer_from2_encode({"from": IP_ID, "to": OTHER, "tokenId": 1, "data": b"\x01"})
        assert short.data.startswith("0x42842e0e")
        assert long.data.startswith("0xb88d4fde")
        by_signature = client.overload("safeTransferFrom(address,address,uint256,bytes)", encode=True)
        assert by_signature({"from": IP_ID, "to": OTHER, "tokenId": 1, "data": b"\x01"}) == long

        transfer = client.overload("safeTransferFrom(address,address,uint256)")
        asyncio.run(transfer(**{"from": IP_ID, "to": OTHER, "tokenId": 1}))
        assert mock_wallet.sent[0].function_name_or_signature == "safeTransferFrom(address,address,uint256)"

        with pytest.raises(ValueError):
            client.encode("safeTransferFrom", {"from": IP_ID, "to": OTHER, "tokenId": 1})
        with pytest.raises(AttributeError):
            SampleReadOnlyClient(mock_transport).overload("cancelDispute(uint256,bytes)")

    def test_encode_is_pure(self):
        """Encoding touches neither the transport nor the wallet and is deterministic."""
        transport = MagicMock()
        transport.chain_id = 1513
        wallet = MagicMock()
        client = SampleClient(transport, wallet)
        transport.reset_mock()

        first = client.cancel_dispute_encode({"disputeId": 7, "data": b""})
        second = client.encode("cancelDispute", disputeId=7, data=b"")
        assert first == second
        assert isinstance(first, EncodedTxData)
        assert first.to == SAMPLE_ADDRESS
        assert first.data == encode_function_data(SampleClient.abi, "cancelDispute", [7, b""])
        assert transport.mock_calls == []
        assert wallet.mock_calls == []


class TestEventClient:
    """Tests for watching and parsing events."""

    def test_parse_tx_filters_and_keeps_order(self, mock_transport):
        """Non matching logs are skipped and the rest keep their order."""
        receipt = {"logs": [_cancelled_log(1, 0), _transfer_log(9), _cancelled_log(2, 2)]}
        client = SampleEventClient(mock_transport)
        events = client.parse_tx_dispute_cancelled_event(receipt)
        assert events == [{"disputeId": 1, "data": b""}, {"disputeId": 2, "data": b""}]
        assert client.parse_tx_transfer_event(receipt) == [{"from": IP_ID, "to": OTHER, "tokenId": 9}]
        assert client.parse_tx_transfer_event({"logs": []}) == []
        assert not mock_transport.calls

    def test_parse_tx_skips_invalid_utf8(self, mock_transport):
        """A log whose string field is not valid utf-8 is skipped, not raised."""
        bad = _registered_log("ignored", 1)
        bad["data"] = HexBytes(encode(["bytes"], [b"\xff\xfe\xfd"]))
        receipt = {"logs": [_registered_log("first", 0), bad, _registered_log("second", 2)]}
        events = SampleEventClient(mock_transport).parse_tx_ip_registered_event(receipt)
        assert events == [{"ipId": IP_ID, "name": "first"}, {"ipId": IP_ID, "name": "second"}]

    def test_parse_tx_skips_non_hex_data(self, mock_transport):
        """A log whose data is not hex is skipped, not raised."""
        bad = {**_registered_log("ignored", 1), "data": "0xzz"}
        receipt = {"logs": [_registered_log("first", 0), bad, _registered_log("second", 2)]}
        assert len(SampleEventClient(mock_transport).parse_tx_ip_registered_event(receipt)) == 2

    def test_watch_decodes_each_log(self, mock_transport):
        """The callback sees every matching log with its transaction hash."""
        seen = []
        client = SampleEventClient(mock_transport)
        client.watch_dispute_cancelled_event(lambda tx_hash, args: seen.append((tx_hash, args)))
        mock_transport.emit([_cancelled_log(1), _transfer_log(3), _cancelled_log(2)])
        assert seen == [
            (_cancelled_log(1)["transactionHash"], {"disputeId": 1, "data": b""}),
            (_cancelled_log(2)["transactionHash"], {"disputeId": 2, "data": b""}),
        ]

    def test_unwatch_stops_callbacks(self, mock_transport):
        """No events are delivered after the handle is called."""
        on_each_event = MagicMock()
        client = SampleEventClient(mock_transport)
        unwatch = client.watch_dispute_cancelled_event(on_each_event)
        mock_transport.emit([_cancelled_log(1)])
        assert on_each_event.call_count == 1
        unwatch()
        mock_transport.emit([_cancelled_log(2)])
        assert on_each_event.call_count == 1

    def test_unknown_event(self, mock_transport):
        """Unknown events raise before subscribing."""
        with pytest.raises(KeyError):
            SampleEventClient(mock_transport).watch_event("Approval", print)
        assert not mock_transport.subscriptions
