"""Paying royalties to IP assets and claiming revenue from their royalty vaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from ..base.addresses import ZERO_ADDRESS
from ..base.transport import Transport
from ..base.wallet import Wallet
from ..contracts import (
    IPAccountImplClient,
    IPAssetRegistryReadOnlyClient,
    IpRoyaltyVaultImplClient,
    RoyaltyModuleClient,
    RoyaltyPolicyLAPReadOnlyClient,
)
from ._resource import ResourceClient, TxOptions, tx_hash_response


@dataclass
class PayRoyaltyOnBehalfRequest:
    """Pay royalties to an IP asset on behalf of another one."""

    receiver_ip_id: str
    payer_ip_id: str
    token: str
    amount: int
    tx_options: TxOptions | None = None


@dataclass
class ClaimableRevenueRequest:
    """Look up the revenue an account can claim from a snapshot of an IP's royalty vault."""

    royalty_vault_ip_id: str
    account: str
    snapshot_id: int
    token: str


@dataclass
class ClaimRevenueRequest:
    """Claim revenue from snapshots of an IP's royalty vault.

    Attributes
    ----------
    snapshot_ids: Sequence[int]
        The snapshots to claim from.
    token: str
        The revenue token to claim.
    royalty_vault_ip_id: str
        The IP whose royalty vault pays out.
    account: str | None
        An IP account holding the royalty tokens. The claim is executed from it when given,
        otherwise the wallet claims for itself.
    tx_options: TxOptions | None
        Options for sending the transaction.
    """

    snapshot_ids: Sequence[int]
    token: str
    royalty_vault_ip_id: str
    account: str | None = None
    tx_options: TxOptions | None = None


@dataclass
class SnapshotRequest:
    """Snapshot the revenue of an IP's royalty vault."""

    royalty_vault_ip_id: str
    tx_options: TxOptions | None = None


class RoyaltyClient(ResourceClient):
    """Pays royalties through the RoyaltyModule and claims revenue from IP royalty vaults.

    Arguments
    ---------
    transport: Transport
        The read capable handle to the chain.
    wallet: Wallet | None, optional
        Signs and sends transactions. Only reads are available without one.
    royalty_module_address: str | None, optional
        Defaults to the deployment on the transport's chain.
    royalty_policy_lap_address: str | None, optional
        Defaults to the deployment on the transport's chain.
    ip_asset_registry_address: str | None, optional
        Defaults to the deployment on the transport's chain.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        transport: Transport,
        wallet: Wallet | None = None,
        royalty_module_address: str | None = None,
        royalty_policy_lap_address: str | None = None,
        ip_asset_registry_address: str | None = None,
    ) -> None:
        super().__init__(transport, wallet)
        self.royalty_module_client = RoyaltyModuleClient(transport, wallet, royalty_module_address)  # type: ignore
        self.royalty_policy_lap_client = RoyaltyPolicyLAPReadOnlyClient(transport, royalty_policy_lap_address)
        self.ip_asset_registry_client = IPAssetRegistryReadOnlyClient(transport, ip_asset_registry_address)

    async def _check_registered(self, ip_id: str, role: str) -> ChecksumAddress:
        ip_id = to_checksum_address(ip_id)
        if not await self.ip_asset_registry_client.is_registered(id=ip_id):
            raise ValueError(f"The {role} IP with id {ip_id} is not registered.")
        return ip_id

    def _royalty_vault(self, vault_address: str) -> Any:
        return IpRoyaltyVaultImplClient(self.transport, self.wallet, vault_address)  # type: ignore

    async def get_royalty_vault_address(self, ip_id: str) -> ChecksumAddress:
        """Get the royalty vault of a registered IP.

        Arguments
        ---------
        ip_id: str
            The IP asset.

        Returns
        -------
        ChecksumAddress
            The vault address.
        """
        ip_id = await self._check_registered(ip_id, "royalty vault")
        royalty_data = await self.royalty_policy_lap_client.get_royalty_data(ipId=ip_id)
        vault_address = to_checksum_address(royalty_data["value1"])
        if vault_address == ZERO_ADDRESS:
            raise ValueError(f"The royalty vault of IP with id {ip_id} is not set.")
        return vault_address

    async def claimable_revenue(self, request: ClaimableRevenueRequest) -> int:
        """Get the revenue an account can claim from a vault snapshot.

        Arguments
        ---------
        request: ClaimableRevenueRequest
            The vault's IP, the claimer, the snapshot and the revenue token.

        Returns
        -------
        int
            The claimable amount, in the token's base units.
        """
        vault_address = await self.get_royalty_vault_address(request.royalty_vault_ip_id)
        return await self._royalty_vault(vault_address).claimable_revenue(
            account=to_checksum_address(request.account),
            snapshotId=request.snapshot_id,
            token=to_checksum_address(request.token),
        )

    async def claim_revenue(self, request: ClaimRevenueRequest) -> dict[str, Any]:
        """Claim revenue from vault snapshots, directly or through an IP account.

        Arguments
        ---------
        request: ClaimRevenueRequest
            The snapshots, token and vault to claim from.

        Returns
        -------
        dict[str, Any]
            `tx_hash`, and `claimable_token` (the claimed amount) when the transaction was waited for.
        """
        self._check_wallet("claim revenue")
        vault_address = await self.get_royalty_vault_address(request.royalty_vault_ip_id)
        vault = self._royalty_vault(vault_address)
        claim_args = {"snapshotIds": list(request.snapshot_ids), "token": to_checksum_address(request.token)}
        if request.account is None:
            tx_hash = await vault.claim_revenue_by_snapshot_batch(claim_args)
        else:
            encoded = vault.claim_revenue_by_snapshot_batch_encode(claim_args)
            ip_account = IPAccountImplClient(
                self.transport, self.wallet, to_checksum_address(request.account)  # type: ignore[arg-type]
            )
            tx_hash = await ip_account.execute(to=encoded.to, value=0, data=encoded.data)
        response = tx_hash_response(tx_hash)
        logging.debug("Claimed revenue from vault %s in tx %s", vault_address, response["tx_hash"])

        tx_receipt = await self._wait_if_requested(tx_hash, request.tx_options)
        if tx_receipt is not None:
            events = vault.parse_tx_revenue_token_claimed_event(tx_receipt)
            if len(events) != 1:
                raise ValueError(f"Unexpected number of RevenueTokenClaimed events: {events}")
            response["claimable_token"] = events[0]["amount"]
        return response

    async def pay_royalty_on_behalf(self, request: PayRoyaltyOnBehalfRequest) -> dict[str, Any]:
        """Pay royalties to an IP on behalf of another IP. Both must be registered.

        Arguments
        ---------
        request: PayRoyaltyOnBehalfRequest
            The receiver, the payer, and the token and amount to pay.

        Returns
        -------
        dict[str, Any]
            `tx_hash` of the payment transaction.
        """
        self._check_wallet("pay royalties")
        receiver_ip_id = await self._check_registered(request.receiver_ip_id, "receiver")
        payer_ip_id = await self._check_registered(request.payer_ip_id, "payer")
        tx_hash = await self.royalty_module_client.pay_royalty_on_behalf(
            receiverIpId=receiver_ip_id,
            payerIpId=payer_ip_id,
            token=to_checksum_address(request.token),
            amount=request.amount,
        )
        await self._wait_if_requested(tx_hash, request.tx_options)
        return tx_hash_response(tx_hash)

    async def snapshot(self, request: SnapshotRequest) -> dict[str, Any]:
        """Snapshot the revenue held by an IP's royalty vault, opening it for claims.

        Arguments
        ---------
        request: SnapshotRequest
            The IP whose vault to snapshot.

        Returns
        -------
        dict[str, Any]
            `tx_hash`, and `snapshot_id` when the transaction was waited for.
        """
        self._check_wallet("snapshot a royalty vault")
        vault_address = await self.get_royalty_vault_address(request.royalty_vault_ip_id)
        vault = self._royalty_vault(vault_address)
        tx_hash = await vault.snapshot()
        response = tx_hash_response(tx_hash)
        tx_receipt = await self._wait_if_requested(tx_hash, request.tx_options)
        if tx_receipt is not None:
            events = vault.parse_tx_snapshot_completed_event(tx_receipt)
            if len(events) != 1:
                raise ValueError(f"Unexpected number of SnapshotCompleted events: {events}")
            response["snapshot_id"] = events[0]["snapshotId"]
        return response
