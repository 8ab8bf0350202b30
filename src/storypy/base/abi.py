"""Utilities for solidity contract ABIs."""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, Mapping, Sequence

from eth_utils.crypto import keccak
from hexbytes import HexBytes
from web3 import Web3
from web3.contract import Contract

READ_ONLY_MUTABILITIES = ("view", "pure")
WRITE_MUTABILITIES = ("nonpayable", "payable")

# Providerless web3 used to encode calls and decode logs; it never sends a request
OFFLINE_WEB3 = Web3()


def camel_to_snake(camel_string: str) -> str:
    """Convert a solidity camelCase (or SCREAMING_CASE) name to a python snake_case name.

    Acronyms are kept together, so `tokenURI` becomes `token_uri` and `getIPAccount` becomes `get_ip_account`.

    Arguments
    ---------
    camel_string: str
        The ABI name.

    Returns
    -------
    str
        The snake case name.
    """
    snake_string = re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "_", camel_string)
    return re.sub(r"_+", "_", snake_string).strip("_").lower()


def avoid_python_keywords(name: str, reserved: Sequence[str] = ()) -> str:
    """Make sure the name is not a reserved Python word or an attribute we already use.

    If it is, append an underscore.

    Arguments
    ---------
    name: str
       Unsafe name.
    reserved: Sequence[str], optional
        Additional names that can not be used.

    Returns
    -------
    str
        The name, with a trailing underscore if it was reserved.
    """
    if keyword.iskeyword(name) or keyword.issoftkeyword(name) or name in reserved:
        return name + "_"
    return name


@dataclass(frozen=True)
class AbiParam:
    """An input or output of a function, event or error."""

    name: str
    type: str
    components: tuple[AbiParam, ...] = ()
    indexed: bool = False
    internal_type: str = ""

    @classmethod
    def from_dict(cls, param: Mapping[str, Any]) -> AbiParam:
        """Build the param from its json representation."""
        return cls(
            name=param.get("name") or "",
            type=param["type"],
            components=tuple(cls.from_dict(component) for component in param.get("components") or []),
            indexed=bool(param.get("indexed", False)),
            internal_type=param.get("internalType") or "",
        )

    @property
    def is_tuple(self) -> bool:
        """True if the param is a struct, or an array of structs."""
        return self.type.startswith("tuple")

    @property
    def is_array(self) -> bool:
        """True if the param is a fixed or dynamic array."""
        return self.type.endswith("]")

    @property
    def is_dynamic(self) -> bool:
        """True if the value is hashed when used as an indexed event topic."""
        return self.type in ("string", "bytes") or self.is_tuple or self.is_array

    @property
    def canonical_type(self) -> str:
        """The type string used in signatures and by eth_abi, e.g. `(uint256,address)[]`."""
        if self.is_tuple:
            inner_types = ",".join(component.canonical_type for component in self.components)
            return f"({inner_types}){self.type[len('tuple'):]}"
        return self.type

    def element(self) -> AbiParam:
        """The element param of an array param, i.e. `uint256[3]` -> `uint256`."""
        if not self.is_array:
            raise ValueError(f"{self.type} is not an array type.")
        return AbiParam(
            name=self.name,
            type=self.type[: self.type.rindex("[")],
            components=self.components,
            internal_type=self.internal_type,
        )


def _signature(name: str, inputs: Sequence[AbiParam]) -> str:
    return f"{name}({','.join(param.canonical_type for param in inputs)})"


@dataclass(frozen=True)
class AbiFunction:
    """A solidity function."""

    name: str
    inputs: tuple[AbiParam, ...]
    outputs: tuple[AbiParam, ...]
    state_mutability: str
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> AbiFunction:
        """Build the function from its json representation."""
        state_mutability = item.get("stateMutability")
        if state_mutability is None:
            # Pre 0.5 solc output only carries the constant and payable flags
            if item.get("constant"):
                state_mutability = "view"
            else:
                state_mutability = "payable" if item.get("payable") else "nonpayable"
        return cls(
            name=item["name"],
            inputs=tuple(AbiParam.from_dict(param) for param in item.get("inputs") or []),
            outputs=tuple(AbiParam.from_dict(param) for param in item.get("outputs") or []),
            state_mutability=state_mutability,
            raw=item,
        )

    @property
    def signature(self) -> str:
        """The full signature, e.g. `transfer(address,uint256)`."""
        return _signature(self.name, self.inputs)

    @property
    def selector(self) -> HexBytes:
        """The first four bytes of the keccak hash of the signature."""
        return HexBytes(keccak(text=self.signature)[:4])

    @property
    def is_read_only(self) -> bool:
        """True for view and pure functions."""
        return self.state_mutability in READ_ONLY_MUTABILITIES

    @property
    def is_write(self) -> bool:
        """True for functions that need a transaction."""
        return self.state_mutability in WRITE_MUTABILITIES

    @property
    def is_payable(self) -> bool:
        """True if the function accepts value."""
        return self.state_mutability == "payable"


@dataclass(frozen=True)
class AbiEvent:
    """A solidity event."""

    name: str
    inputs: tuple[AbiParam, ...]
    anonymous: bool = False
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> AbiEvent:
        """Build the event from its json representation."""
        return cls(
            name=item["name"],
            inputs=tuple(AbiParam.from_dict(param) for param in item.get("inputs") or []),
            anonymous=bool(item.get("anonymous", False)),
            raw=item,
        )

    @property
    def signature(self) -> str:
        """The full signature, e.g. `Transfer(address,address,uint256)`."""
        return _signature(self.name, self.inputs)

    @property
    def topic(self) -> HexBytes:
        """The keccak hash of the signature, emitted as the first topic of non-anonymous events."""
        return HexBytes(keccak(text=self.signature))

    @property
    def indexed_inputs(self) -> tuple[AbiParam, ...]:
        """Inputs stored in the log topics."""
        return tuple(param for param in self.inputs if param.indexed)

    @property
    def data_inputs(self) -> tuple[AbiParam, ...]:
        """Inputs abi encoded in the log data."""
        return tuple(param for param in self.inputs if not param.indexed)


@dataclass(frozen=True)
class AbiError:
    """A solidity custom error."""

    name: str
    inputs: tuple[AbiParam, ...]

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> AbiError:
        """Build the error from its json representation."""
        return cls(name=item["name"], inputs=tuple(AbiParam.from_dict(param) for param in item.get("inputs") or []))

    @property
    def signature(self) -> str:
        """The full signature, e.g. `Unauthorized(address)`."""
        return _signature(self.name, self.inputs)

    @property
    def selector(self) -> HexBytes:
        """The first four bytes of the keccak hash of the signature."""
        return HexBytes(keccak(text=self.signature)[:4])


class ContractAbi:
    """A parsed contract ABI.

    Functions that share a name (solidity overloads) are kept as separate entries keyed by their full
    signature. The first declaration of a name gets the plain python method name, later declarations
    get a numeric suffix starting at 2.

    Arguments
    ---------
    abi: Sequence[Mapping[str, Any]]
        The ABI as emitted by solc, i.e. a list of json items.
    reserved_names: Sequence[str], optional
        Python names that generated method names must not collide with.
    """

    def __init__(self, abi: Sequence[Mapping[str, Any]], reserved_names: Sequence[str] = ()) -> None:
        self.raw: list[Mapping[str, Any]] = list(abi)
        self.functions: tuple[AbiFunction, ...] = tuple(
            AbiFunction.from_dict(item) for item in self.raw if item.get("type") == "function"
        )
        self.events: tuple[AbiEvent, ...] = tuple(
            AbiEvent.from_dict(item) for item in self.raw if item.get("type") == "event"
        )
        self.errors: tuple[AbiError, ...] = tuple(
            AbiError.from_dict(item) for item in self.raw if item.get("type") == "error"
        )
        self._functions_by_signature = {function.signature: function for function in self.functions}
        self._events_by_name = {event.name: event for event in self.events}
        self.method_names: dict[str, str] = _overload_method_names(self.functions, reserved_names)

    @cached_property
    def contract(self) -> type[Contract]:
        """The address-less web3 contract class for this abi, used to encode calls and decode logs offline."""
        return OFFLINE_WEB3.eth.contract(abi=self.raw)

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    @property
    def read_functions(self) -> tuple[AbiFunction, ...]:
        """All view and pure functions."""
        return tuple(function for function in self.functions if function.is_read_only)

    @property
    def write_functions(self) -> tuple[AbiFunction, ...]:
        """All nonpayable and payable functions."""
        return tuple(function for function in self.functions if function.is_write)

    def overloads(self, name: str) -> tuple[AbiFunction, ...]:
        """All functions declared with the given name, in ABI order."""
        return tuple(function for function in self.functions if function.name == name)

    def get_function(self, name_or_signature: str) -> AbiFunction:
        """Look up a function by full signature, or by name when the name is not overloaded.

        Arguments
        ---------
        name_or_signature: str
            Either `transfer` or `transfer(address,uint256)`.

        Returns
        -------
        AbiFunction
            The matching function.
        """
        if "(" in name_or_signature:
            function = self._functions_by_signature.get(name_or_signature.replace(" ", ""))
            if function is None:
                raise KeyError(f"Function {name_or_signature} not found in the abi.")
            return function
        overloads = self.overloads(name_or_signature)
        if not overloads:
            raise KeyError(f"Function {name_or_signature} not found in the abi.")
        if len(overloads) > 1:
            raise ValueError(
                f"Function {name_or_signature} is overloaded, use one of the signatures "
                f"{[function.signature for function in overloads]}."
            )
        return overloads[0]

    def get_event(self, name: str) -> AbiEvent:
        """Look up an event by name."""
        event = self._events_by_name.get(name)
        if event is None:
            raise KeyError(f"Event {name} not found in the abi.")
        return event


def _overload_method_names(functions: Sequence[AbiFunction], reserved_names: Sequence[str]) -> dict[str, str]:
    """Map each function signature to a unique python method name."""
    method_names: dict[str, str] = {}
    seen_count: dict[str, int] = {}
    for function in functions:
        seen_count[function.name] = seen_count.get(function.name, 0) + 1
        method_name = camel_to_snake(function.name)
        if seen_count[function.name] > 1:
            method_name += str(seen_count[function.name])
        method_names[function.signature] = avoid_python_keywords(method_name, reserved_names)
    return method_names
