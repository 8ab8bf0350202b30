"""Tests for transport.py"""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest
from eth_abi import encode
from eth_utils import to_checksum_address
from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import ContractCustomError, InvalidAddress

from .abi import ContractAbi
from .errors import ContractCallException, ContractCallType
from .transport import ContractCallRequest, LogPoller, SimulatedCall, Web3Transport

CONTRACT = to_checksum_address("0x" + "c3" * 20)
ACCOUNT = to_checksum_address("0x" + "a1" * 20)

TEST_ABI = ContractAbi(
    [
        {
            "type": "function",
            "name": "name",
            "inputs": [],
            "outputs": [{"name": "", "type": "string"}],
            "stateMutability": "view",
        },
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
            "name": "state",
            "inputs": [],
            "outputs": [
                {
                    "name": "",
                    "type": "tuple",
                    "components": [{"name": "owner", "type": "address"}, {"name": "nonce", "type": "uint256"}],
                }
            ],
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
            "type": "event",
            "name": "DisputeCancelled",
            "inputs": [
                {"name": "disputeId", "type": "uint256", "indexed": False},
                {"name": "data", "type": "bytes", "indexed": False},
            ],
            "anonymous": False,
        },
        {"type": "error", "name": "NotDisputeInitiator", "inputs": []},
    ]
)


@pytest.fixture
def web3() -> MagicMock:
    """A mocked web3 object.

    Returns
    -------
    MagicMock
        The mock, with chain id 1513.
    """
    mock_web3 = MagicMock()
    mock_web3.eth.chain_id = 1513
    return mock_web3


def _prepared_call(web3: MagicMock) -> MagicMock:
    """The mock returned by `contract.get_function_by_signature(...)(...)`."""
    return web3.eth.contract.return_value.get_function_by_signature.return_value.return_value


class TestWeb3Transport:
    """Tests for Web3Transport reads and simulations."""

    def test_chain_id(self, web3):
        """The chain id comes from the provider."""
        assert Web3Transport(web3).chain_id == 1513

    def test_read_contract(self, web3):
        """Reads call the function by signature on a web3 contract at the address."""
        _prepared_call(web3).call.return_value = "DisputeModule"
        transport = Web3Transport(web3)
        assert transport.read_contract(TEST_ABI, CONTRACT, "name", []) == "DisputeModule"
        web3.eth.contract.assert_called_once_with(address=CONTRACT, abi=TEST_ABI.raw)
        web3.eth.contract.return_value.get_function_by_signature.assert_called_once_with("name()")
        _prepared_call(web3).call.assert_called_once_with(block_identifier="latest")

    def test_read_contract_normalizes_args(self, web3):
        """Arguments are checksummed before they reach web3, and several outputs become a tuple."""
        _prepared_call(web3).call.return_value = [ACCOUNT, 1]
        transport = Web3Transport(web3)
        result = transport.read_contract(TEST_ABI, CONTRACT, "getAttachedLicenseTerms", [ACCOUNT.lower(), 0], 7)
        assert result == (ACCOUNT, 1)
        web3.eth.contract.return_value.get_function_by_signature.return_value.assert_called_once_with(ACCOUNT, 0)
        _prepared_call(web3).call.assert_called_once_with(block_identifier=7)

    def test_read_contract_custom_error(self, web3):
        """Reverts are wrapped with the decoded custom error name."""
        selector = TEST_ABI.errors[0].selector.to_0x_hex()
        _prepared_call(web3).call.side_effect = ContractCustomError(selector, data=selector)
        transport = Web3Transport(web3)
        with pytest.raises(ContractCallException) as exc_info:
            transport.read_contract(TEST_ABI, CONTRACT, "name", [])
        assert exc_info.value.contract_call_type == ContractCallType.READ
        assert exc_info.value.function_name_or_signature == "name()"
        assert isinstance(exc_info.value.orig_exception, ContractCustomError)
        assert "NotDisputeInitiator" in exc_info.value.orig_exception.args[-1]

    def test_read_contract_with_web3(self):
        """A real web3 contract decodes struct outputs as tuples."""
        w3 = Web3()
        w3.eth.call = MagicMock(return_value=HexBytes(encode(["(address,uint256)"], [(ACCOUNT, 3)])))
        assert Web3Transport(w3).read_contract(TEST_ABI, CONTRACT, "state", []) == (ACCOUNT, 3)
        call_transaction = w3.eth.call.call_args.args[0]
        assert call_transaction["to"] == CONTRACT
        assert call_transaction["data"] == TEST_ABI.get_function("state").selector.to_0x_hex()

    @pytest.mark.parametrize("address", ["0x", "0x1234"])
    def test_malformed_address(self, address):
        """Malformed addresses fail as an address error wrapped in ContractCallException, without any rpc."""
        w3 = Web3()
        w3.eth.call = MagicMock()
        with pytest.raises(ContractCallException) as exc_info:
            Web3Transport(w3).read_contract(TEST_ABI, address, "name", [])
        assert isinstance(exc_info.value.orig_exception, InvalidAddress)
        w3.eth.call.assert_not_called()

    def test_simulate_contract(self, web3):
        """Simulations call from the account and return the request to broadcast."""
        _prepared_call(web3).call.return_value = ()
        transport = Web3Transport(web3)
        simulated = transport.simulate_contract(TEST_ABI, CONTRACT, "cancelDispute", [1, b""], account=ACCOUNT)
        assert isinstance(simulated, SimulatedCall)
        assert simulated.result is None
        assert isinstance(simulated.request, ContractCallRequest)
        assert simulated.request.to == CONTRACT
        assert simulated.request.account == ACCOUNT
        assert simulated.request.function_name_or_signature == "cancelDispute(uint256,bytes)"
        assert simulated.request.data.startswith(TEST_ABI.get_function("cancelDispute").selector.to_0x_hex())
        tx_params = _prepared_call(web3).call.call_args.args[0]
        assert tx_params == {"from": ACCOUNT}
        assert _prepared_call(web3).call.call_args.kwargs == {"block_identifier": "latest"}

    def test_simulate_contract_failure(self, web3):
        """Failed simulations are wrapped as previews."""
        _prepared_call(web3).call.side_effect = ValueError("execution reverted")
        transport = Web3Transport(web3)
        with pytest.raises(ContractCallException) as exc_info:
            transport.simulate_contract(TEST_ABI, CONTRACT, "cancelDispute", [1, b""], account=ACCOUNT, value=5)
        assert exc_info.value.contract_call_type == ContractCallType.PREVIEW
        assert exc_info.value.fn_args == (1, b"")
        assert _prepared_call(web3).call.call_args.args[0]["value"] == 5

    def test_unknown_function(self, web3):
        """Unknown functions fail before any rpc call."""
        with pytest.raises(KeyError):
            Web3Transport(web3).read_contract(TEST_ABI, CONTRACT, "symbol", [])
        web3.eth.contract.assert_not_called()


class TestLogPoller:
    """Tests for LogPoller."""

    def test_poll_starts_after_current_head(self, web3):
        """The first poll only records the chain head."""
        web3.eth.block_number = 10
        on_logs = MagicMock()
        poller = LogPoller(web3, CONTRACT, ["0x01"], on_logs)
        assert poller.poll() == []
        assert poller.next_block == 11
        web3.eth.get_logs.assert_not_called()
        on_logs.assert_not_called()

    def test_poll_delivers_new_logs(self, web3):
        """New blocks are queried once and delivered in one batch."""
        web3.eth.block_number = 10
        on_logs = MagicMock()
        poller = LogPoller(web3, CONTRACT, ["0x01"], on_logs)
        poller.poll()

        logs = [{"logIndex": 0}, {"logIndex": 1}]
        web3.eth.get_logs.return_value = logs
        web3.eth.block_number = 12
        assert poller.poll() == logs
        on_logs.assert_called_once_with(logs)
        assert web3.eth.get_logs.call_args.args[0] == {
            "address": CONTRACT,
            "topics": ["0x01"],
            "fromBlock": 11,
            "toBlock": 12,
        }

        # No new blocks, no query
        web3.eth.get_logs.reset_mock()
        assert poller.poll() == []
        web3.eth.get_logs.assert_not_called()

    def test_empty_batches_are_not_delivered(self, web3):
        """The callback only sees non empty batches."""
        web3.eth.block_number = 1
        on_logs = MagicMock()
        poller = LogPoller(web3, CONTRACT, [], on_logs)
        poller.poll()
        web3.eth.get_logs.return_value = []
        web3.eth.block_number = 2
        poller.poll()
        on_logs.assert_not_called()
        assert poller.next_block == 3

    def test_stop(self, web3):
        """Stopping joins the polling thread."""
        web3.eth.block_number = 1
        poller = LogPoller(web3, CONTRACT, [], MagicMock(), poll_interval=60)
        poller.start()
        assert poller.is_running
        poller.stop()
        assert not poller.is_running

    def test_watch_contract_event(self, web3):
        """Watching polls for the event topic and returns a stop handle."""
        web3.eth.block_number = 1
        delivered = threading.Event()
        web3.eth.get_logs.return_value = [{"logIndex": 0}]

        def on_logs(logs):
            delivered.set()
            web3.eth.block_number += 1

        transport = Web3Transport(web3, poll_interval=0.01)
        unwatch = transport.watch_contract_event(TEST_ABI, CONTRACT, "DisputeCancelled", on_logs)
        web3.eth.block_number = 2
        assert delivered.wait(5)
        unwatch()
        filter_params = web3.eth.get_logs.call_args.args[0]
        assert filter_params["address"] == CONTRACT
        assert filter_params["topics"] == [TEST_ABI.get_event("DisputeCancelled").topic.to_0x_hex()]

        # Nothing is queried after unwatch returns
        calls = web3.eth.get_logs.call_count
        web3.eth.block_number += 5
        threading.Event().wait(0.05)
        assert web3.eth.get_logs.call_count == calls
