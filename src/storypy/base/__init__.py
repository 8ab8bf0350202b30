"""Base utilities for working with contracts via web3"""

from .abi import AbiError, AbiEvent, AbiFunction, AbiParam, ContractAbi, camel_to_snake
from .addresses import (
    HASH_ZERO,
    UNRESOLVED_ADDRESS,
    ZERO_ADDRESS,
    fetch_deployment_addresses_from_uri,
    resolve_address,
)
from .codec import decode_event_log, encode_function_data, normalize_args, normalize_value, try_decode_event_log
from .errors import ContractCallException, ContractCallType, EventDecodeError, decode_error_selector_for_abi
from .retry_call import retry_call
from .transactions import async_wait_for_transaction_receipt
from .transport import ContractCallRequest, LogPoller, SimulatedCall, Transport, Web3Transport
from .wallet import LocalAccountWallet, Wallet
from .web3_setup import initialize_web3_with_http_provider
