"""Custom error reporting and contract error parsing."""

from .errors import ContractCallException, ContractCallType, decode_error_selector_for_abi
from .types import EventDecodeError, UnknownBlockError
