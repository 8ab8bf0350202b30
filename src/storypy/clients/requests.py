"""Flatten keyword style requests into positional contract arguments and reshape multi value results."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..base.abi import AbiFunction, AbiParam


def _input_key(param: AbiParam, idx: int) -> str:
    return param.name or f"arg{idx}"


def _output_key(param: AbiParam, idx: int) -> str:
    return param.name or f"value{idx}"


def build_args(function: AbiFunction, request: Any = None, **kwargs: Any) -> list[Any]:
    """Build the positional arguments of a contract call from a request object.

    Arguments
    ---------
    function: AbiFunction
        The function being called.
    request: Any, optional
        A mapping keyed by ABI input names (a dict or TypedDict), or an object carrying them as
        attributes (a dataclass or NamedTuple). Unnamed inputs are keyed `arg0`, `arg1`, ...
    **kwargs: Any
        Inputs given as keyword arguments; these take precedence over the request.

    Returns
    -------
    list[Any]
        The arguments in ABI order. Struct inputs are left as given and converted to tuples by the codec.
    """
    values: dict[str, Any] = {}
    if request is not None:
        if isinstance(request, Mapping):
            values.update(request)
        else:
            for idx, param in enumerate(function.inputs):
                key = _input_key(param, idx)
                if hasattr(request, key):
                    values[key] = getattr(request, key)
    values.update(kwargs)

    expected_keys = [_input_key(param, idx) for idx, param in enumerate(function.inputs)]
    unexpected_keys = [key for key in values if key not in expected_keys]
    if unexpected_keys:
        raise TypeError(f"{function.signature} got unexpected inputs {unexpected_keys}.")
    missing_keys = [key for key in expected_keys if key not in values]
    if missing_keys:
        raise TypeError(f"{function.signature} is missing inputs {missing_keys}.")
    return [values[key] for key in expected_keys]


def reshape_outputs(function: AbiFunction, raw: Any) -> Any:
    """Name the values returned by a read.

    Arguments
    ---------
    function: AbiFunction
        The function that was called.
    raw: Any
        The decoded return value; a positional sequence when the function has several outputs.

    Returns
    -------
    Any
        A dict keyed by output name, in ABI order, for functions with several outputs.
        The raw value otherwise.
    """
    if len(function.outputs) <= 1:
        return raw
    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)) or len(raw) != len(function.outputs):
        raise ValueError(f"{function.signature} returns {len(function.outputs)} values, got {raw!r}.")
    return {_output_key(param, idx): value for idx, (param, value) in enumerate(zip(function.outputs, raw))}
