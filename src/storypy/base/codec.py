"""Input normalization, calldata encoding and event log decoding through web3 contract objects."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from eth_abi.exceptions import DecodingError
from eth_typing import HexStr
from eth_utils import is_hex_address, to_checksum_address
from hexbytes import HexBytes
from web3.exceptions import InvalidEventABI, LogTopicError, MismatchedABI

from .abi import AbiFunction, AbiParam, ContractAbi
from .errors import EventDecodeError

# Receipt fields web3 copies onto decoded events; raw logs may not carry them
_LOG_METADATA_DEFAULTS = {
    "address": None,
    "blockHash": None,
    "blockNumber": None,
    "logIndex": None,
    "transactionHash": None,
    "transactionIndex": None,
}

# UnicodeDecodeError (invalid utf-8 strings) and binascii.Error (non hex data) are ValueErrors
LOG_DECODE_ERRORS = (DecodingError, InvalidEventABI, LogTopicError, MismatchedABI, TypeError, ValueError)


def normalize_value(param: AbiParam, value: Any) -> Any:
    """Convert a python value into the shape web3 encodes for the param.

    Structs can be given as mappings keyed by component name, as objects with matching attributes
    (e.g. dataclasses), or positionally as sequences. Hex strings are accepted for bytes types and any
    cased hex address is accepted for addresses.

    Arguments
    ---------
    param: AbiParam
        The ABI param describing the value.
    value: Any
        The value supplied by the caller.

    Returns
    -------
    Any
        The value with structs as tuples, arrays as lists and addresses checksummed.
    """
    if param.is_array:
        element = param.element()
        return [normalize_value(element, item) for item in value]
    if param.is_tuple:
        if isinstance(value, Mapping):
            return tuple(
                normalize_value(component, value[_param_key(component, idx)])
                for idx, component in enumerate(param.components)
            )
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != len(param.components):
                raise ValueError(
                    f"Expected {len(param.components)} values for {param.canonical_type}, got {len(value)}."
                )
            return tuple(normalize_value(component, item) for component, item in zip(param.components, value))
        return tuple(
            normalize_value(component, getattr(value, _param_key(component, idx)))
            for idx, component in enumerate(param.components)
        )
    if param.type == "address" and isinstance(value, str) and is_hex_address(value):
        return to_checksum_address(value)
    if param.type.startswith("bytes") and isinstance(value, str):
        return bytes(HexBytes(value))
    return value


def _param_key(param: AbiParam, idx: int) -> str:
    return param.name or f"arg{idx}"


def normalize_args(function: AbiFunction, args: Sequence[Any]) -> list[Any]:
    """Normalize positional arguments for a function call.

    Arguments
    ---------
    function: AbiFunction
        The function being called.
    args: Sequence[Any]
        The positional arguments, in ABI order.

    Returns
    -------
    list[Any]
        The arguments as web3 expects them.
    """
    if len(args) != len(function.inputs):
        raise ValueError(f"{function.signature} expects {len(function.inputs)} arguments, got {len(args)}.")
    return [normalize_value(param, arg) for param, arg in zip(function.inputs, args)]


def encode_function_data(abi: ContractAbi, function_name_or_signature: str, args: Sequence[Any]) -> HexStr:
    """ABI encode a function call with the web3 contract for the abi.

    Arguments
    ---------
    abi: ContractAbi
        The contract abi.
    function_name_or_signature: str
        The function being called.
    args: Sequence[Any]
        The positional arguments, in ABI order.

    Returns
    -------
    HexStr
        The 0x prefixed calldata, selector followed by the encoded arguments.
    """
    function = abi.get_function(function_name_or_signature)
    return HexStr(abi.contract.encode_abi(function.signature, args=normalize_args(function, args)))


def decode_event_log(abi: ContractAbi, event_name: str, log: Mapping[str, Any]) -> dict[str, Any]:
    """Decode a raw log against an event with the web3 contract for the abi.

    Indexed dynamic values (strings, bytes, arrays and structs) are only stored as their hash,
    so the raw 32 byte topic is returned for those.

    Arguments
    ---------
    abi: ContractAbi
        The contract abi.
    event_name: str
        The event to decode against.
    log: Mapping[str, Any]
        A log entry with `topics` and `data`, e.g. from a transaction receipt.

    Returns
    -------
    dict[str, Any]
        The event arguments keyed by name, in ABI order.
    """
    event = abi.get_event(event_name)
    try:
        event_data = abi.contract.events[event.name]().process_log({**_LOG_METADATA_DEFAULTS, **log})
    except LOG_DECODE_ERRORS as err:
        raise EventDecodeError(f"Log could not be decoded as {event.signature}: {err!r}") from err
    args = event_data["args"]
    # web3 puts indexed args first; keep ABI order
    return {param.name: args[param.name] for param in event.inputs}


def try_decode_event_log(abi: ContractAbi, event_name: str, log: Mapping[str, Any]) -> dict[str, Any] | None:
    """Decode a log against an event, returning None if the log is not an instance of the event.

    Arguments
    ---------
    abi: ContractAbi
        The contract abi.
    event_name: str
        The event to decode against.
    log: Mapping[str, Any]
        A log entry with `topics` and `data`, e.g. from a transaction receipt.

    Returns
    -------
    dict[str, Any] | None
        The decoded event arguments, or None on mismatch.
    """
    try:
        return decode_event_log(abi, event_name, log)
    except EventDecodeError as err:
        logging.debug("Skipping log %s: %s", log.get("logIndex"), err)
        return None
