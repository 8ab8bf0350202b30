"""Error handling for contract calls."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence

from hexbytes import HexBytes

from ..abi import AbiError


class ContractCallType(Enum):
    r"""The kind of contract call that failed."""

    PREVIEW = "preview"
    TRANSACTION = "transaction"
    READ = "read"


class ContractCallException(Exception):
    """Custom contract call exception wrapper that contains additional information on the function call."""

    # We'd like to pass in these optional kwargs to this exception
    # pylint: disable=too-many-arguments
    def __init__(
        self,
        *args,
        # Explicitly passing these arguments as kwargs to allow for multiple `args` to be passed in
        # similar for other types of exceptions
        orig_exception: Exception | list[Exception] | BaseException | None = None,
        contract_call_type: ContractCallType | None = None,
        function_name_or_signature: str | None = None,
        fn_args: tuple | None = None,
        fn_kwargs: dict[str, Any] | None = None,
        raw_txn: dict[str, Any] | None = None,
        block_number: int | None = None,
    ):
        super().__init__(*args)
        self.orig_exception = orig_exception
        self.contract_call_type = contract_call_type
        self.function_name_or_signature = function_name_or_signature
        self.fn_args = fn_args
        self.fn_kwargs = fn_kwargs
        self.block_number = block_number
        self.raw_txn = raw_txn


def decode_error_selector_for_abi(error_selector: str | bytes, abi: Sequence[Mapping[str, Any]]) -> str:
    """Decode the error selector for a contract abi.

    Arguments
    ---------
    error_selector: str | bytes
        A 4 byte hex string obtained from a keccak256 hash of the error signature, i.e.
        'InvalidToken()' would yield '0xc1ab6dc1'. Longer revert data is accepted, only the first
        four bytes are used.
    abi: Sequence[Mapping[str, Any]]
        The contract abi, as a raw list of json items or a ContractAbi.

    Returns
    -------
    str
       The name of the error. If the error is not found, returns UnknownError.
    """
    if not abi:
        raise ValueError("Contract does not have an abi, cannot decode the error selector.")

    selector = HexBytes(error_selector)[:4]
    for item in abi:
        if item.get("type") == "error" and AbiError.from_dict(item).selector == selector:
            return item["name"]
    return "UnknownError"
