"""Event, read-only and write clients for a deployed contract, generated from its ABI."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, ClassVar, Mapping, NamedTuple, Sequence

from eth_typing import ChecksumAddress, HexStr
from eth_utils import to_checksum_address
from web3.types import LogReceipt, TxReceipt

from ..base.abi import ContractAbi, camel_to_snake
from ..base.addresses import UNRESOLVED_ADDRESS, resolve_address
from ..base.codec import encode_function_data, try_decode_event_log
from ..base.transport import Transport
from ..base.wallet import Wallet
from .requests import build_args, reshape_outputs

# Client attributes that generated method names must not shadow
RESERVED_NAMES = (
    "abi",
    "address",
    "address_table",
    "contract_name",
    "encode",
    "overload",
    "parse_tx_event",
    "read",
    "transport",
    "wallet",
    "watch_event",
    "write",
)

OnEachEvent = Callable[[Any, dict[str, Any]], None]


class EncodedTxData(NamedTuple):
    """Calldata for a write, to be sent by the caller."""

    to: ChecksumAddress
    data: HexStr


class ContractConfig(NamedTuple):
    """The deployed address and ABI of a contract."""

    address: ChecksumAddress
    abi: ContractAbi


class ContractClients(NamedTuple):
    """The client classes generated for one contract."""

    event_client: type[ContractEventClient]
    read_only_client: type[ContractReadOnlyClient] | None
    client: type[ContractClient]


class ContractEventClient:
    """Subscribes to and decodes the events of a contract.

    Arguments
    ---------
    transport: Transport
        The read capable handle to the chain.
    address: str | None, optional
        The contract address. Defaults to the deployment on the transport's chain.
    """

    contract_name: ClassVar[str] = ""
    abi: ClassVar[ContractAbi]
    address_table: ClassVar[Mapping[int, str]] = {}

    def __init__(self, transport: Transport, address: str | None = None) -> None:
        self.transport = transport
        if address is None:
            self.address = resolve_address(self.address_table, transport.chain_id)
        elif address == UNRESOLVED_ADDRESS:
            self.address = UNRESOLVED_ADDRESS
        else:
            self.address = to_checksum_address(address)

    def watch_event(self, event_name: str, on_each_event: OnEachEvent) -> Any:
        """Call `on_each_event(tx_hash, args)` for every new occurrence of the event.

        Logs the transport hands over that do not decode as the event are skipped.

        Arguments
        ---------
        event_name: str
            The event to subscribe to.
        on_each_event: OnEachEvent
            Called once per log with the transaction hash and the decoded event arguments.

        Returns
        -------
        Any
            The unsubscribe handle returned by the transport.
        """
        event = self.abi.get_event(event_name)

        def on_logs(logs: Sequence[LogReceipt]) -> None:
            for log in logs:
                args = try_decode_event_log(self.abi, event.name, log)
                if args is not None:
                    on_each_event(log.get("transactionHash"), args)

        return self.transport.watch_contract_event(self.abi, self.address, event.name, on_logs)

    def parse_tx_event(self, event_name: str, receipt: TxReceipt | Mapping[str, Any]) -> list[dict[str, Any]]:
        """Decode the occurrences of an event in a transaction receipt.

        Arguments
        ---------
        event_name: str
            The event to look for.
        receipt: TxReceipt | Mapping[str, Any]
            An already fetched transaction receipt.

        Returns
        -------
        list[dict[str, Any]]
            The decoded event arguments, in log order. Logs of other events are left out.
        """
        event = self.abi.get_event(event_name)
        events = []
        for log in receipt.get("logs") or []:
            args = try_decode_event_log(self.abi, event.name, log)
            if args is not None:
                events.append(args)
        return events


class ContractReadOnlyClient(ContractEventClient):
    """Calls the view and pure functions of a contract."""

    async def read(self, function: str, request: Any = None, /, **kwargs: Any) -> Any:
        """Call a view or pure function.

        Arguments
        ---------
        function: str
            The function name, or the full signature of an overload.
        request: Any, optional
            The inputs as a mapping or an object with matching attributes.
        **kwargs: Any
            The inputs as keyword arguments.

        Returns
        -------
        Any
            A dict keyed by output name when the function returns several values, otherwise the value.
        """
        abi_function = self.abi.get_function(function)
        args = build_args(abi_function, request, **kwargs)
        result = await asyncio.to_thread(
            self.transport.read_contract, self.abi, self.address, abi_function.signature, args
        )
        return reshape_outputs(abi_function, result)

    def overload(self, signature: str, encode: bool = False) -> Callable[..., Any]:
        """Get the generated method for one overload of a function.

        Arguments
        ---------
        signature: str
            The full signature, e.g. `safeTransferFrom(address,address,uint256,bytes)`.
        encode: bool, optional
            If True, return the calldata encoding variant of a write.

        Returns
        -------
        Callable[..., Any]
            The bound method.
        """
        abi_function = self.abi.get_function(signature)
        method_name = self.abi.method_names[abi_function.signature]
        if encode:
            method_name += "_encode"
        try:
            return getattr(self, method_name)
        except AttributeError as err:
            raise AttributeError(f"{type(self).__name__} has no method for {abi_function.signature}.") from err


class ContractClient(ContractReadOnlyClient):
    """Simulates and sends transactions to a contract.

    Arguments
    ---------
    transport: Transport
        The read capable handle to the chain, used for reads and simulations.
    wallet: Wallet
        Signs and broadcasts simulated calls.
    address: str | None, optional
        The contract address. Defaults to the deployment on the transport's chain.
    """

    def __init__(self, transport: Transport, wallet: Wallet, address: str | None = None) -> None:
        super().__init__(transport, address)
        self.wallet = wallet

    async def write(
        self, function: str, request: Any = None, /, *, tx_value: int | None = None, **kwargs: Any
    ) -> Any:
        """Simulate a write against current state and, if it succeeds, send it through the wallet.

        Errors raised by the simulation propagate unchanged and nothing is sent.

        Arguments
        ---------
        function: str
            The function name, or the full signature of an overload.
        request: Any, optional
            The inputs as a mapping or an object with matching attributes.
        tx_value: int | None, optional
            Wei to send with a payable function. Kept apart from the inputs, which may themselves be named `value`.
        **kwargs: Any
            The inputs as keyword arguments.

        Returns
        -------
        Any
            What the wallet returns for the broadcast, the transaction hash.
        """
        abi_function = self.abi.get_function(function)
        args = build_args(abi_function, request, **kwargs)
        simulated = await asyncio.to_thread(
            self.transport.simulate_contract,
            self.abi,
            self.address,
            abi_function.signature,
            args,
            account=self.wallet.account,
            value=tx_value,
        )
        return await asyncio.to_thread(self.wallet.write_contract, simulated.request)

    def encode(self, function: str, request: Any = None, /, **kwargs: Any) -> EncodedTxData:
        """Encode the calldata of a write without touching the chain.

        Arguments
        ---------
        function: str
            The function name, or the full signature of an overload.
        request: Any, optional
            The inputs as a mapping or an object with matching attributes.
        **kwargs: Any
            The inputs as keyword arguments.

        Returns
        -------
        EncodedTxData
            The contract address and the calldata.
        """
        abi_function = self.abi.get_function(function)
        args = build_args(abi_function, request, **kwargs)
        return EncodedTxData(to=self.address, data=encode_function_data(self.abi, abi_function.signature, args))


def _watch_method(event_name: str, method_name: str) -> Callable[..., Any]:
    def method(self: ContractEventClient, on_each_event: OnEachEvent) -> Any:
        return self.watch_event(event_name, on_each_event)

    method.__name__ = method_name
    method.__doc__ = f"Subscribe to `{event_name}` events, returning the unsubscribe handle."
    return method


def _parse_tx_method(event_name: str, method_name: str) -> Callable[..., Any]:
    def method(self: ContractEventClient, receipt: TxReceipt | Mapping[str, Any]) -> list[dict[str, Any]]:
        return self.parse_tx_event(event_name, receipt)

    method.__name__ = method_name
    method.__doc__ = f"Decode the `{event_name}` events in a transaction receipt."
    return method


def _read_method(signature: str, method_name: str) -> Callable[..., Any]:
    async def method(self: ContractReadOnlyClient, request: Any = None, /, **kwargs: Any) -> Any:
        return await self.read(signature, request, **kwargs)

    method.__name__ = method_name
    method.__doc__ = f"Call `{signature}`."
    return method


def _write_method(signature: str, method_name: str) -> Callable[..., Any]:
    async def method(
        self: ContractClient, request: Any = None, /, *, tx_value: int | None = None, **kwargs: Any
    ) -> Any:
        return await self.write(signature, request, tx_value=tx_value, **kwargs)

    method.__name__ = method_name
    method.__doc__ = f"Simulate and send `{signature}`, returning the transaction hash."
    return method


def _encode_method(signature: str, method_name: str) -> Callable[..., Any]:
    def method(self: ContractClient, request: Any = None, /, **kwargs: Any) -> EncodedTxData:
        return self.encode(signature, request, **kwargs)

    method.__name__ = method_name
    method.__doc__ = f"Encode the calldata of `{signature}`."
    return method


def _with_qualnames(class_name: str, methods: dict[str, Any]) -> dict[str, Any]:
    for name, method in methods.items():
        method.__qualname__ = f"{class_name}.{name}"
    return methods


def build_contract_clients(
    contract_name: str,
    abi: Sequence[Mapping[str, Any]] | ContractAbi,
    address_table: Mapping[int, str],
) -> ContractClients:
    """Generate the event, read-only and write client classes for a contract.

    Every event gets `watch_<event>_event` and `parse_tx_<event>_event` methods, every view or pure
    function an async method on the read-only client, and every nonpayable or payable function an
    async method and an `_encode` variant on the write client. Overloads after the first declaration
    are suffixed with 2, 3, ... and all of them are reachable with `overload(signature)`.

    Arguments
    ---------
    contract_name: str
        The contract name, used to name the classes, e.g. `DisputeModule`.
    abi: Sequence[Mapping[str, Any]] | ContractAbi
        The contract ABI.
    address_table: Mapping[int, str]
        Deployed addresses keyed by chain id.

    Returns
    -------
    ContractClients
        The generated classes. `read_only_client` is None when the contract has no read functions.
    """
    # Rebuilt so generated names never shadow the base client attributes
    contract_abi = ContractAbi(abi.raw if isinstance(abi, ContractAbi) else abi, reserved_names=RESERVED_NAMES)
    class_attrs = {
        "contract_name": contract_name,
        "abi": contract_abi,
        "address_table": dict(address_table),
        "__module__": __name__,
    }

    event_class_name = f"{contract_name}EventClient"
    event_methods: dict[str, Any] = {}
    for event in contract_abi.events:
        snake_name = camel_to_snake(event.name)
        watch_name = f"watch_{snake_name}_event"
        parse_name = f"parse_tx_{snake_name}_event"
        event_methods[watch_name] = _watch_method(event.name, watch_name)
        event_methods[parse_name] = _parse_tx_method(event.name, parse_name)
    event_client = type(
        event_class_name,
        (ContractEventClient,),
        {
            **class_attrs,
            **_with_qualnames(event_class_name, event_methods),
            "__doc__": f"Event client for the {contract_name} contract.",
        },
    )

    read_only_client = None
    write_bases: tuple[type, ...] = (event_client, ContractClient)
    if contract_abi.read_functions:
        read_class_name = f"{contract_name}ReadOnlyClient"
        read_methods = {
            contract_abi.method_names[function.signature]: _read_method(
                function.signature, contract_abi.method_names[function.signature]
            )
            for function in contract_abi.read_functions
        }
        read_only_client = type(
            read_class_name,
            (event_client, ContractReadOnlyClient),
            {
                **class_attrs,
                **_with_qualnames(read_class_name, read_methods),
                "__doc__": f"Read-only client for the {contract_name} contract.",
            },
        )
        write_bases = (read_only_client, ContractClient)

    write_class_name = f"{contract_name}Client"
    write_methods: dict[str, Any] = {}
    for function in contract_abi.write_functions:
        method_name = contract_abi.method_names[function.signature]
        write_methods[method_name] = _write_method(function.signature, method_name)
        write_methods[f"{method_name}_encode"] = _encode_method(function.signature, f"{method_name}_encode")
    client = type(
        write_class_name,
        write_bases,
        {
            **class_attrs,
            **_with_qualnames(write_class_name, write_methods),
            "__doc__": f"Client for the {contract_name} contract.",
        },
    )
    return ContractClients(event_client=event_client, read_only_client=read_only_client, client=client)
