"""Transaction options and the wallet and receipt handling shared by the resource clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hexbytes import HexBytes

from ..base.transport import Transport
from ..base.wallet import Wallet


@dataclass
class TxOptions:
    """Options for sending a transaction.

    Attributes
    ----------
    wait_for_transaction: bool
        If True, wait for the transaction to be mined and parse its events.
    timeout: float | None
        Seconds to wait for the receipt. Defaults to the transport's timeout.
    """

    wait_for_transaction: bool = False
    timeout: float | None = None


class ResourceClient:
    """Base for the workflow clients that sit on top of the generated contract clients.

    Arguments
    ---------
    transport: Transport
        The read capable handle to the chain.
    wallet: Wallet | None, optional
        Signs and sends transactions. Only reads are available without one.
    """

    def __init__(self, transport: Transport, wallet: Wallet | None = None) -> None:
        self.transport = transport
        self.wallet = wallet

    def _check_wallet(self, action: str) -> None:
        if self.wallet is None:
            raise ValueError(f"A wallet is required to {action}.")

    async def _wait_if_requested(self, tx_hash: Any, tx_options: TxOptions | None) -> Any:
        """Wait for the receipt when the options ask for it, otherwise return None."""
        if tx_options is None or not tx_options.wait_for_transaction:
            return None
        return await self.transport.wait_for_transaction_receipt(tx_hash, timeout=tx_options.timeout)


def tx_hash_response(tx_hash: Any) -> dict[str, Any]:
    """The response of a write, with the transaction hash as a 0x prefixed string."""
    return {"tx_hash": HexBytes(tx_hash).to_0x_hex()}
