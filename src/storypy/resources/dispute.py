"""Raising, cancelling and resolving disputes against IP assets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from eth_utils import to_checksum_address

from ..base.transport import Transport
from ..base.wallet import Wallet
from ..contracts import DisputeModuleClient
from ._resource import ResourceClient, TxOptions, tx_hash_response

# Dispute tags are stored on chain as right padded bytes32 strings
DISPUTE_TAG_SIZE = 32


@dataclass
class RaiseDisputeRequest:
    """Raise a dispute against an IP asset."""

    target_ip_id: str
    link_to_dispute_evidence: str
    target_tag: str
    arbitration_policy: str | None = None
    tx_options: TxOptions | None = None


@dataclass
class CancelDisputeRequest:
    """Cancel a dispute raised by the sender."""

    dispute_id: int
    data: bytes = b""
    tx_options: TxOptions | None = None


@dataclass
class ResolveDisputeRequest:
    """Resolve a dispute that has a judgement."""

    dispute_id: int
    data: bytes = b""
    tx_options: TxOptions | None = None


def encode_dispute_tag(tag: str | bytes) -> bytes:
    """Right pad a dispute tag to bytes32.

    Arguments
    ---------
    tag: str | bytes
        The tag, e.g. "PLAGIARISM".

    Returns
    -------
    bytes
        The 32 byte tag.
    """
    tag_bytes = tag.encode("utf-8") if isinstance(tag, str) else bytes(tag)
    if len(tag_bytes) > DISPUTE_TAG_SIZE:
        raise ValueError(f"Dispute tag {tag!r} is longer than {DISPUTE_TAG_SIZE} bytes.")
    return tag_bytes.ljust(DISPUTE_TAG_SIZE, b"\x00")


class DisputeClient(ResourceClient):
    """Raises and settles disputes through the DisputeModule contract.

    Arguments
    ---------
    transport: Transport
        The read capable handle to the chain.
    wallet: Wallet | None, optional
        Signs and sends transactions. Only reads are available without one.
    address: str | None, optional
        The DisputeModule address. Defaults to the deployment on the transport's chain.
    """

    def __init__(self, transport: Transport, wallet: Wallet | None = None, address: str | None = None) -> None:
        super().__init__(transport, wallet)
        # Reads and simulations do not touch the wallet, so the module client works without one
        self.dispute_module_client = DisputeModuleClient(transport, wallet, address)  # type: ignore[arg-type]

    async def raise_dispute(self, request: RaiseDisputeRequest) -> dict[str, Any]:
        """Raise a dispute on an IP asset.

        The dispute is arbitrated by the arbitration policy set on the target IP, or the module's base
        policy. An explicit `arbitration_policy` is checked against the module's whitelist first.

        Arguments
        ---------
        request: RaiseDisputeRequest
            The target, evidence link and tag of the dispute.

        Returns
        -------
        dict[str, Any]
            `tx_hash`, and `dispute_id` when the transaction was waited for.
        """
        self._check_wallet("raise a dispute")
        target_tag = encode_dispute_tag(request.target_tag)
        if request.arbitration_policy is not None:
            arbitration_policy = to_checksum_address(request.arbitration_policy)
            is_whitelisted = await self.dispute_module_client.is_whitelisted_arbitration_policy(
                arbitrationPolicy=arbitration_policy
            )
            if not is_whitelisted:
                raise ValueError(f"Arbitration policy {arbitration_policy} is not whitelisted.")

        tx_hash = await self.dispute_module_client.raise_dispute(
            targetIpId=to_checksum_address(request.target_ip_id),
            linkToDisputeEvidence=request.link_to_dispute_evidence,
            targetTag=target_tag,
            data=b"",
        )
        response = tx_hash_response(tx_hash)
        logging.debug("Raised dispute on %s in tx %s", request.target_ip_id, response["tx_hash"])

        tx_receipt = await self._wait_if_requested(tx_hash, request.tx_options)
        if tx_receipt is not None:
            events = self.dispute_module_client.parse_tx_dispute_raised_event(tx_receipt)
            if len(events) != 1:
                raise ValueError(f"Unexpected number of DisputeRaised events: {events}")
            response["dispute_id"] = events[0]["disputeId"]
        return response

    async def cancel_dispute(self, request: CancelDisputeRequest) -> dict[str, Any]:
        """Cancel a dispute. Only the dispute initiator can cancel.

        Arguments
        ---------
        request: CancelDisputeRequest
            The dispute to cancel.

        Returns
        -------
        dict[str, Any]
            `tx_hash` of the cancel transaction.
        """
        self._check_wallet("cancel a dispute")
        tx_hash = await self.dispute_module_client.cancel_dispute(disputeId=request.dispute_id, data=request.data)
        await self._wait_if_requested(tx_hash, request.tx_options)
        return tx_hash_response(tx_hash)

    async def resolve_dispute(self, request: ResolveDisputeRequest) -> dict[str, Any]:
        """Resolve a dispute after the arbitration judgement.

        Arguments
        ---------
        request: ResolveDisputeRequest
            The dispute to resolve.

        Returns
        -------
        dict[str, Any]
            `tx_hash` of the resolve transaction.
        """
        self._check_wallet("resolve a dispute")
        tx_hash = await self.dispute_module_client.resolve_dispute(disputeId=request.dispute_id, data=request.data)
        await self._wait_if_requested(tx_hash, request.tx_options)
        return tx_hash_response(tx_hash)

    async def read_disputes(self, request: Any = None, /, **kwargs: Any) -> dict[str, Any]:
        """Get the stored data of a dispute, keyed by field name."""
        return await self.dispute_module_client.disputes(request, **kwargs)

    async def read_is_whitelisted_arbitration_policy(self, request: Any = None, /, **kwargs: Any) -> bool:
        """Check whether an arbitration policy is whitelisted."""
        return await self.dispute_module_client.is_whitelisted_arbitration_policy(request, **kwargs)

    async def read_is_whitelisted_dispute_tag(self, request: Any = None, /, **kwargs: Any) -> bool:
        """Check whether a dispute tag is whitelisted. String tags are padded to bytes32."""
        tag = kwargs.pop("tag", None)
        if tag is None and request is not None:
            tag = request.get("tag") if isinstance(request, Mapping) else getattr(request, "tag", None)
        if tag is None:
            raise TypeError("Missing input: tag")
        return await self.dispute_module_client.is_whitelisted_dispute_tag(tag=encode_dispute_tag(tag))

    async def read_base_arbitration_policy(self) -> str:
        """Get the arbitration policy used when an IP has none set."""
        return await self.dispute_module_client.base_arbitration_policy()

    async def read_dispute_id(self) -> int:
        """Get the id of the latest dispute."""
        return await self.dispute_module_client.dispute_counter()

    async def read_name(self) -> str:
        """Get the name of the module."""
        return await self.dispute_module_client.name()
