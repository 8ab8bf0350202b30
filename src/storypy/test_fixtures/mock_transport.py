"""In-memory transport and wallet for testing contract clients without a chain."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from eth_abi import encode
from eth_typing import ChecksumAddress
from eth_utils import is_checksum_address, to_checksum_address
from eth_utils.crypto import keccak
from hexbytes import HexBytes
from web3.exceptions import InvalidAddress

from storypy.base.abi import AbiEvent, AbiParam, ContractAbi
from storypy.base.addresses import ZERO_ADDRESS
from storypy.base.codec import encode_function_data, normalize_value
from storypy.base.transport import ContractCallRequest, SimulatedCall

MOCK_ACCOUNT = to_checksum_address("0x" + "a1" * 20)
MOCK_TX_HASH = HexBytes(b"\x42" * 32)


def _check_address(address: str) -> None:
    # Same as web3 contract objects, which only accept checksummed addresses
    if not is_checksum_address(address):
        raise InvalidAddress(f"{address!r} is not a checksummed address.")


class _Subscription:
    def __init__(self, address: ChecksumAddress, event_name: str, on_logs: Callable[[list], None]) -> None:
        self.address = address
        self.event_name = event_name
        self.on_logs = on_logs
        self.active = True

    def unwatch(self) -> None:
        self.active = False


class MockTransport:
    """A transport that answers reads from a table and emits logs on demand.

    Arguments
    ---------
    chain_id: int, optional
        The chain id reported to clients.
    """

    def __init__(self, chain_id: int = 1513) -> None:
        self.chain_id = chain_id
        # Keyed by full signature or bare function name
        self.read_results: dict[str, Any] = {}
        self.simulate_results: dict[str, Any] = {}
        self.simulate_error: Exception | None = None
        self.calls: list[tuple[str, ChecksumAddress, str, tuple]] = []
        self.subscriptions: list[_Subscription] = []
        # Keyed by transaction hash
        self.receipts: dict[bytes, Mapping[str, Any]] = {}

    def read_contract(
        self, abi: ContractAbi, address: ChecksumAddress, function_name_or_signature: str, args: Sequence[Any]
    ) -> Any:
        """Record the read and return the configured result."""
        self.calls.append(("read_contract", address, function_name_or_signature, tuple(args)))
        _check_address(address)
        signature = abi.get_function(function_name_or_signature).signature
        if signature in self.read_results:
            return self.read_results[signature]
        return self.read_results[signature.split("(", 1)[0]]

    def simulate_contract(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        function_name_or_signature: str,
        args: Sequence[Any],
        account: ChecksumAddress | None = None,
        value: int | None = None,
    ) -> SimulatedCall:
        """Record the simulation, raising `simulate_error` when set."""
        # pylint: disable=too-many-arguments
        self.calls.append(("simulate_contract", address, function_name_or_signature, tuple(args)))
        _check_address(address)
        if self.simulate_error is not None:
            raise self.simulate_error
        function = abi.get_function(function_name_or_signature)
        request = ContractCallRequest(
            to=address,
            data=encode_function_data(abi, function.signature, args),
            account=account,
            value=value,
            function_name_or_signature=function.signature,
            args=tuple(args),
        )
        result = self.simulate_results.get(function.signature, self.simulate_results.get(function.name))
        return SimulatedCall(result=result, request=request)

    def watch_contract_event(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        event_name: str,
        on_logs: Callable[[list], None],
    ) -> Callable[[], None]:
        """Register a subscription, returning its unwatch handle."""
        abi.get_event(event_name)
        subscription = _Subscription(address, event_name, on_logs)
        self.subscriptions.append(subscription)
        return subscription.unwatch

    async def wait_for_transaction_receipt(
        self, transaction_hash: HexBytes | bytes | str, timeout: float | None = None
    ) -> Mapping[str, Any]:
        """Return the configured receipt for the hash."""
        # pylint: disable=unused-argument
        return self.receipts[HexBytes(transaction_hash)]

    def emit(self, logs: Sequence[Mapping[str, Any]]) -> None:
        """Deliver a batch of logs to every active subscription."""
        for subscription in list(self.subscriptions):
            if subscription.active:
                subscription.on_logs(list(logs))


class MockWallet:
    """A wallet that records the requests it is asked to send.

    Arguments
    ---------
    account: ChecksumAddress, optional
        The sending address.
    tx_hash: HexBytes, optional
        The hash returned for every write.
    """

    def __init__(self, account: ChecksumAddress = MOCK_ACCOUNT, tx_hash: HexBytes = MOCK_TX_HASH) -> None:
        self.account = account
        self.tx_hash = tx_hash
        self.sent: list[ContractCallRequest] = []

    def write_contract(self, request: ContractCallRequest) -> HexBytes:
        """Record the request and return the configured hash."""
        self.sent.append(request)
        return self.tx_hash


def _encode_topic(param: AbiParam, value: Any) -> HexBytes:
    if param.type == "string":
        return HexBytes(keccak(text=value))
    if param.type == "bytes":
        return HexBytes(keccak(HexBytes(value)))
    if param.is_dynamic:
        raise ValueError(f"Indexed {param.canonical_type} values are not supported.")
    return HexBytes(encode([param.canonical_type], [normalize_value(param, value)]))


def encode_event_log(
    event: AbiEvent,
    args: Mapping[str, Any],
    address: str | None = None,
    transaction_hash: HexBytes = MOCK_TX_HASH,
    log_index: int = 0,
) -> dict[str, Any]:
    """Build a raw log, shaped like a receipt log, for an event occurrence.

    Arguments
    ---------
    event: AbiEvent
        The event being emitted.
    args: Mapping[str, Any]
        The event arguments keyed by input name.
    address: str | None, optional
        The emitting contract.
    transaction_hash: HexBytes, optional
        The hash of the emitting transaction.
    log_index: int, optional
        The index of the log in its block.

    Returns
    -------
    dict[str, Any]
        The log, with the fields of a receipt log.
    """
    topics = [event.topic] + [_encode_topic(param, args[param.name]) for param in event.indexed_inputs]
    data = encode(
        [param.canonical_type for param in event.data_inputs],
        [normalize_value(param, args[param.name]) for param in event.data_inputs],
    )
    return {
        "address": to_checksum_address(address) if address is not None else ZERO_ADDRESS,
        "topics": topics,
        "data": HexBytes(data),
        "blockHash": HexBytes(b"\x00" * 32),
        "blockNumber": 1,
        "transactionHash": transaction_hash,
        "transactionIndex": 0,
        "logIndex": log_index,
    }
