"""Web3 powered functions for waiting on submitted transactions."""

from __future__ import annotations

import asyncio
import random
import time

from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import TimeExhausted, TransactionNotFound
from web3.types import TxReceipt

from .errors import ContractCallException, ContractCallType, UnknownBlockError

DEFAULT_RECEIPT_TIMEOUT = 120.0


async def async_wait_for_transaction_receipt(
    web3: Web3,
    transaction_hash: HexBytes | bytes | str,
    timeout: float | None = None,
    start_latency: float = 0.01,
    backoff_multiplier: float = 2,
    validate_transaction: bool = False,
) -> TxReceipt:
    """Poll for a transaction receipt with exponential backoff, without blocking the event loop.

    Arguments
    ---------
    web3: Web3
        web3 provider object
    transaction_hash: HexBytes | bytes | str
        The hash of the transaction.
    timeout: float | None, optional
        Seconds to wait before giving up. Defaults to DEFAULT_RECEIPT_TIMEOUT.
    start_latency: float, optional
        Seconds to wait after the first poll.
    backoff_multiplier: float, optional
        The factor the wait grows by after every poll.
    validate_transaction: bool, optional
        If True, raise when the mined transaction reverted.

    Returns
    -------
    TxReceipt
        The transaction receipt
    """
    # pylint: disable=too-many-arguments
    if timeout is None:
        timeout = DEFAULT_RECEIPT_TIMEOUT
    transaction_hash = HexBytes(transaction_hash)
    deadline = time.monotonic() + timeout
    poll_latency = start_latency
    while True:
        try:
            tx_receipt = await asyncio.to_thread(web3.eth.get_transaction_receipt, transaction_hash)
            break
        except TransactionNotFound:
            pass
        if time.monotonic() + poll_latency > deadline:
            raise TimeExhausted(
                f"Transaction {transaction_hash.to_0x_hex()} is not in the chain after {timeout} seconds"
            )
        await asyncio.sleep(poll_latency)
        # Jitter the latency to spread out concurrent waiters
        poll_latency = poll_latency * backoff_multiplier + random.uniform(0, 0.1)

    if validate_transaction:
        check_txn_receipt(tx_receipt)
    return tx_receipt


def check_txn_receipt(tx_receipt: TxReceipt) -> TxReceipt:
    """Raise if a mined transaction reverted.

    Arguments
    ---------
    tx_receipt: TxReceipt
        The receipt of a mined transaction.

    Returns
    -------
    TxReceipt
        The same receipt, if the transaction succeeded.
    """
    # The block number of this call failing is the previous block
    block_number = tx_receipt.get("blockNumber", 0) - 1
    status = tx_receipt.get("status", None)
    orig_exception = None
    if status is None:
        orig_exception = UnknownBlockError("Receipt did not return status")
    elif status == 0:
        orig_exception = UnknownBlockError("Receipt has status of 0", f"{tx_receipt=}")
    if orig_exception is not None:
        raise ContractCallException(
            "Error in transaction receipt",
            orig_exception=orig_exception,
            contract_call_type=ContractCallType.TRANSACTION,
            block_number=block_number,
        )
    return tx_receipt
