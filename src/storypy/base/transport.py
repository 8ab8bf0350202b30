"""The read and subscribe boundary that contract clients call through, and its web3.py implementation."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, NamedTuple, Protocol, Sequence

from eth_typing import ChecksumAddress, HexStr
from hexbytes import HexBytes
from web3 import Web3
from web3.contract import Contract
from web3.exceptions import ContractCustomError
from web3.types import BlockIdentifier, LogReceipt, TxParams, TxReceipt

from .abi import AbiFunction, ContractAbi
from .codec import encode_function_data, normalize_args
from .errors import ContractCallException, ContractCallType, decode_error_selector_for_abi
from .retry_call import retry_call
from .transactions import async_wait_for_transaction_receipt

# Seconds between eth_getLogs polls for event subscriptions
DEFAULT_POLL_INTERVAL = 1.0
POLL_RETRY_COUNT = 3

Unwatch = Callable[[], None]


class ContractCallRequest(NamedTuple):
    """A simulated contract call that is ready to be signed and broadcast."""

    to: ChecksumAddress
    data: HexStr
    account: ChecksumAddress | None
    value: int | None
    function_name_or_signature: str
    args: tuple


class SimulatedCall(NamedTuple):
    """The result of simulating a write, and the request to send it with."""

    result: Any
    request: ContractCallRequest


class Transport(Protocol):
    """The read capable handle contract clients are constructed with."""

    @property
    def chain_id(self) -> int:
        """The id of the connected chain."""

    def read_contract(
        self, abi: ContractAbi, address: ChecksumAddress, function_name_or_signature: str, args: Sequence[Any]
    ) -> Any:
        """Call a view or pure function and return the decoded result."""

    def simulate_contract(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        function_name_or_signature: str,
        args: Sequence[Any],
        account: ChecksumAddress | None = None,
        value: int | None = None,
    ) -> SimulatedCall:
        """Dry run a write against current chain state."""

    def watch_contract_event(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        event_name: str,
        on_logs: Callable[[list[LogReceipt]], None],
    ) -> Any:
        """Subscribe to an event, returning the handle used to unsubscribe."""

    async def wait_for_transaction_receipt(
        self, transaction_hash: HexBytes | bytes | str, timeout: float | None = None
    ) -> TxReceipt:
        """Wait until a sent transaction is mined and return its receipt."""


class LogPoller:
    """Polls `eth_getLogs` on a background thread and hands each new batch of logs to a callback.

    Logs are requested from the block after the chain head at start, so only events emitted after the
    subscription are delivered. Batches are delivered in chain order.

    Arguments
    ---------
    web3: Web3
        web3 provider object
    address: ChecksumAddress
        The contract emitting the events.
    topics: list[HexStr | None]
        The topic filter.
    on_logs: Callable[[list[LogReceipt]], None]
        Called with every non empty batch of logs.
    poll_interval: float, optional
        Seconds to wait between polls.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        web3: Web3,
        address: ChecksumAddress,
        topics: list[HexStr | None],
        on_logs: Callable[[list[LogReceipt]], None],
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self.web3 = web3
        self.address = address
        self.topics = topics
        self.on_logs = on_logs
        self.poll_interval = poll_interval
        self.next_block: int | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def poll(self) -> list[LogReceipt]:
        """Fetch and deliver logs emitted since the last poll.

        Returns
        -------
        list[LogReceipt]
            The logs delivered by this poll.
        """
        latest_block = self.web3.eth.block_number
        if self.next_block is None:
            self.next_block = latest_block + 1
            return []
        if latest_block < self.next_block:
            return []
        filter_params: dict[str, Any] = {
            "address": self.address,
            "topics": self.topics,
            "fromBlock": self.next_block,
            "toBlock": latest_block,
        }
        logs = list(self.web3.eth.get_logs(filter_params))  # type: ignore
        # Advance before delivering so a failing callback does not redeliver the batch
        self.next_block = latest_block + 1
        if logs:
            self.on_logs(logs)
        return logs

    def start(self) -> None:
        """Record the chain head and start polling in a daemon thread."""
        self.poll()
        self._thread = threading.Thread(target=self._run, name=f"LogPoller-{self.address}", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop polling. No logs are delivered after this returns, unless called from inside the callback."""
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    @property
    def is_running(self) -> bool:
        """True while the polling thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop_event.wait(self.poll_interval):
            try:
                retry_call(POLL_RETRY_COUNT, None, self.poll)
            # The subscription outlives individual rpc failures
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logging.warning("Polling logs for %s failed with %s", self.address, repr(exc))


class Web3Transport:
    """Transport backed by a web3.py provider.

    Reads and simulations go through `eth_call` on a web3 contract object built from the ABI, and event
    subscriptions are polled with `eth_getLogs`. Failures are wrapped in a ContractCallException
    carrying the call details, with the original exception chained.

    Arguments
    ---------
    web3: Web3
        web3 provider object
    poll_interval: float, optional
        Seconds between polls for event subscriptions.
    """

    def __init__(self, web3: Web3, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        self.web3 = web3
        self.poll_interval = poll_interval

    @property
    def chain_id(self) -> int:
        """The id of the connected chain."""
        return self.web3.eth.chain_id

    def _contract(self, abi: ContractAbi, address: ChecksumAddress) -> Contract:
        """The web3 contract object for the abi at the address; raises InvalidAddress for a malformed address."""
        return self.web3.eth.contract(address=address, abi=abi.raw)

    def read_contract(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        function_name_or_signature: str,
        args: Sequence[Any],
        block_identifier: BlockIdentifier = "latest",
    ) -> Any:
        """Call a view or pure function.

        Arguments
        ---------
        abi: ContractAbi
            The contract abi.
        address: ChecksumAddress
            The deployed contract.
        function_name_or_signature: str
            The function to call.
        args: Sequence[Any]
            Positional arguments in ABI order.
        block_identifier: BlockIdentifier, optional
            The block to read at. Defaults to "latest".

        Returns
        -------
        Any
            The decoded return value; a tuple when the function has several outputs.
        """
        # pylint: disable=too-many-arguments
        function = abi.get_function(function_name_or_signature)
        try:
            contract = self._contract(abi, address)
            result = contract.get_function_by_signature(function.signature)(*normalize_args(function, args)).call(
                block_identifier=block_identifier
            )
        except Exception as err:
            raise _wrap_call_exception(
                "Error in smart contract read", err, abi, ContractCallType.READ, function.signature, args
            ) from err
        return _shape_call_result(function, result)

    def simulate_contract(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        function_name_or_signature: str,
        args: Sequence[Any],
        account: ChecksumAddress | None = None,
        value: int | None = None,
    ) -> SimulatedCall:
        """Dry run a write from the account against the latest block.

        Arguments
        ---------
        abi: ContractAbi
            The contract abi.
        address: ChecksumAddress
            The deployed contract.
        function_name_or_signature: str
            The function to call.
        args: Sequence[Any]
            Positional arguments in ABI order.
        account: ChecksumAddress | None, optional
            The address that will send the transaction.
        value: int | None, optional
            Wei to send along with a payable call.

        Returns
        -------
        SimulatedCall
            The decoded return value of the dry run and the request to broadcast.
        """
        # pylint: disable=too-many-arguments
        function = abi.get_function(function_name_or_signature)
        tx_params: TxParams = {}
        if account is not None:
            tx_params["from"] = account
        if value is not None:
            tx_params["value"] = value
        try:
            contract = self._contract(abi, address)
            prepared_call = contract.get_function_by_signature(function.signature)(*normalize_args(function, args))
            result = prepared_call.call(tx_params, block_identifier="latest")
        except Exception as err:
            raise _wrap_call_exception(
                "Error in preview transaction", err, abi, ContractCallType.PREVIEW, function.signature, args
            ) from err
        request = ContractCallRequest(
            to=address,
            data=encode_function_data(abi, function.signature, args),
            account=account,
            value=value,
            function_name_or_signature=function.signature,
            args=tuple(args),
        )
        return SimulatedCall(result=_shape_call_result(function, result), request=request)

    def watch_contract_event(
        self,
        abi: ContractAbi,
        address: ChecksumAddress,
        event_name: str,
        on_logs: Callable[[list[LogReceipt]], None],
    ) -> Unwatch:
        """Subscribe to an event by polling for new logs.

        Arguments
        ---------
        abi: ContractAbi
            The contract abi.
        address: ChecksumAddress
            The deployed contract.
        event_name: str
            The event to subscribe to.
        on_logs: Callable[[list[LogReceipt]], None]
            Called with each batch of matching logs.

        Returns
        -------
        Unwatch
            Call to stop the subscription.
        """
        event = abi.get_event(event_name)
        poller = LogPoller(self.web3, address, [event.topic.to_0x_hex()], on_logs, self.poll_interval)
        poller.start()
        logging.debug("Watching %s events on %s", event.signature, address)
        return poller.stop

    def get_transaction_receipt(self, transaction_hash: HexBytes | bytes | str) -> TxReceipt:
        """Fetch the receipt of a mined transaction."""
        return self.web3.eth.get_transaction_receipt(HexBytes(transaction_hash))

    async def wait_for_transaction_receipt(
        self, transaction_hash: HexBytes | bytes | str, timeout: float | None = None
    ) -> TxReceipt:
        """Wait until the transaction is mined and return its receipt; raises if it reverted."""
        return await async_wait_for_transaction_receipt(
            self.web3, transaction_hash, timeout=timeout, validate_transaction=True
        )


def _wrap_call_exception(
    message: str,
    err: Exception,
    abi: ContractAbi,
    contract_call_type: ContractCallType,
    function_signature: str,
    args: Sequence[Any],
) -> ContractCallException:
    # pylint: disable=too-many-arguments
    if isinstance(err, ContractCustomError):
        revert_data = err.data if isinstance(err.data, (str, bytes)) else err.args[0]
        err.args += (
            f"ContractCustomError {decode_error_selector_for_abi(revert_data, abi)} raised.\n"
            + f"function name: {function_signature}"
            + f"\nfunction args: {tuple(args)}",
        )
    return ContractCallException(
        message,
        orig_exception=err,
        contract_call_type=contract_call_type,
        function_name_or_signature=function_signature,
        fn_args=tuple(args),
        fn_kwargs={},
    )


def _shape_call_result(function: AbiFunction, result: Any) -> Any:
    """None for functions without outputs, a tuple for several outputs, the value otherwise."""
    if not function.outputs:
        return None
    if len(function.outputs) > 1:
        return tuple(result)
    return result
