"""Tests for royalty.py"""

from __future__ import annotations

import asyncio

import pytest
from eth_utils import to_checksum_address

from storypy.base.addresses import ZERO_ADDRESS
from storypy.contracts import IpRoyaltyVaultImplClient
from storypy.test_fixtures import encode_event_log

from ._resource import TxOptions
from .royalty import (
    ClaimableRevenueRequest,
    ClaimRevenueRequest,
    PayRoyaltyOnBehalfRequest,
    RoyaltyClient,
    SnapshotRequest,
)

# pylint: disable=redefined-outer-name

RECEIVER_IP_ID = to_checksum_address("0x" + "b1" * 20)
PAYER_IP_ID = to_checksum_address("0x" + "b2" * 20)
VAULT = to_checksum_address("0x" + "b3" * 20)
TOKEN = to_checksum_address("0x" + "b4" * 20)


def _royalty_data(vault: str = VAULT) -> tuple:
    return (True, vault, 5, [], [])


def _registered(mock_transport, vault: str = VAULT) -> None:
    mock_transport.read_results["isRegistered"] = True
    mock_transport.read_results["getRoyaltyData"] = _royalty_data(vault)


class TestRoyaltyVault:
    """Tests for looking up vaults and claimable revenue."""

    def test_get_royalty_vault_address(self, mock_transport):
        """The vault is the second value of the royalty data."""
        _registered(mock_transport)
        vault = asyncio.run(RoyaltyClient(mock_transport).get_royalty_vault_address(RECEIVER_IP_ID.lower()))
        assert vault == VAULT
        assert [call[2] for call in mock_transport.calls] == ["isRegistered(address)", "getRoyaltyData(address)"]
        assert mock_transport.calls[1][3] == (RECEIVER_IP_ID,)

    def test_unregistered_ip(self, mock_transport):
        """Unregistered IPs fail before the royalty data is read."""
        mock_transport.read_results["isRegistered"] = False
        with pytest.raises(ValueError, match="not registered"):
            asyncio.run(RoyaltyClient(mock_transport).get_royalty_vault_address(RECEIVER_IP_ID))
        assert len(mock_transport.calls) == 1

    def test_unset_vault(self, mock_transport):
        """A zero vault address means the IP has no vault yet."""
        _registered(mock_transport, vault=ZERO_ADDRESS)
        with pytest.raises(ValueError, match="not set"):
            asyncio.run(RoyaltyClient(mock_transport).get_royalty_vault_address(RECEIVER_IP_ID))

    def test_claimable_revenue(self, mock_transport):
        """The claimable amount is read from the IP's vault."""
        _registered(mock_transport)
        mock_transport.read_results["claimableRevenue"] = 10
        request = ClaimableRevenueRequest(
            royalty_vault_ip_id=RECEIVER_IP_ID, account=PAYER_IP_ID, snapshot_id=1, token=TOKEN
        )
        assert asyncio.run(RoyaltyClient(mock_transport).claimable_revenue(request)) == 10
        address, signature, args = mock_transport.calls[-1][1:]
        assert address == VAULT
        assert signature == "claimableRevenue(address,uint256,address)"
        assert args == (PAYER_IP_ID, 1, TOKEN)


class TestRoyaltyWrites:
    """Tests for paying royalties, snapshots and claims."""

    def test_pay_royalty_on_behalf(self, mock_transport, mock_wallet):
        """Both IPs are checked before the payment is sent to the royalty module."""
        mock_transport.read_results["isRegistered"] = True
        client = RoyaltyClient(mock_transport, mock_wallet)
        request = PayRoyaltyOnBehalfRequest(
            receiver_ip_id=RECEIVER_IP_ID, payer_ip_id=PAYER_IP_ID, token=TOKEN, amount=10
        )
        response = asyncio.run(client.pay_royalty_on_behalf(request))
        assert response == {"tx_hash": mock_wallet.tx_hash.to_0x_hex()}
        sent = mock_wallet.sent[0]
        assert sent.to == client.royalty_module_client.address
        assert sent.function_name_or_signature == "payRoyaltyOnBehalf(address,address,address,uint256)"
        assert sent.args == (RECEIVER_IP_ID, PAYER_IP_ID, TOKEN, 10)

    def test_pay_royalty_unregistered_receiver(self, mock_transport, mock_wallet):
        """Nothing is sent when the receiver is not registered."""
        mock_transport.read_results["isRegistered"] = False
        request = PayRoyaltyOnBehalfRequest(
            receiver_ip_id=RECEIVER_IP_ID, payer_ip_id=PAYER_IP_ID, token=TOKEN, amount=10
        )
        with pytest.raises(ValueError, match="receiver"):
            asyncio.run(RoyaltyClient(mock_transport, mock_wallet).pay_royalty_on_behalf(request))
        assert not mock_wallet.sent

    def test_snapshot(self, mock_transport, mock_wallet):
        """Waiting parses the snapshot id from the SnapshotCompleted event."""
        _registered(mock_transport)
        log = encode_event_log(
            IpRoyaltyVaultImplClient.abi.get_event("SnapshotCompleted"),
            {"snapshotId": 3, "snapshotTimestamp": 1700000000, "unclaimedTokens": 0},
            address=VAULT,
        )
        mock_transport.receipts[mock_wallet.tx_hash] = {"status": 1, "logs": [log]}
        request = SnapshotRequest(royalty_vault_ip_id=RECEIVER_IP_ID, tx_options=TxOptions(wait_for_transaction=True))
        response = asyncio.run(RoyaltyClient(mock_transport, mock_wallet).snapshot(request))
        assert response == {"tx_hash": mock_wallet.tx_hash.to_0x_hex(), "snapshot_id": 3}
        assert mock_wallet.sent[0].to == VAULT
        assert mock_wallet.sent[0].function_name_or_signature == "snapshot()"

    def test_snapshot_missing_event(self, mock_transport, mock_wallet):
        """A mined snapshot without the event raises."""
        _registered(mock_transport)
        mock_transport.receipts[mock_wallet.tx_hash] = {"status": 1, "logs": []}
        request = SnapshotRequest(royalty_vault_ip_id=RECEIVER_IP_ID, tx_options=TxOptions(wait_for_transaction=True))
        with pytest.raises(ValueError, match="SnapshotCompleted"):
            asyncio.run(RoyaltyClient(mock_transport, mock_wallet).snapshot(request))

    def test_claim_revenue(self, mock_transport, mock_wallet):
        """Without an account the wallet claims straight from the vault."""
        _registered(mock_transport)
        log = encode_event_log(
            IpRoyaltyVaultImplClient.abi.get_event("RevenueTokenClaimed"),
            {"claimer": mock_wallet.account, "token": TOKEN, "amount": 25},
            address=VAULT,
        )
        mock_transport.receipts[mock_wallet.tx_hash] = {"status": 1, "logs": [log]}
        request = ClaimRevenueRequest(
            snapshot_ids=[1, 2],
            token=TOKEN.lower(),
            royalty_vault_ip_id=RECEIVER_IP_ID,
            tx_options=TxOptions(wait_for_transaction=True),
        )
        response = asyncio.run(RoyaltyClient(mock_transport, mock_wallet).claim_revenue(request))
        assert response["claimable_token"] == 25
        sent = mock_wallet.sent[0]
        assert sent.to == VAULT
        assert sent.function_name_or_signature == "claimRevenueBySnapshotBatch(uint256[],address)"
        assert sent.args == ([1, 2], TOKEN)

    def test_claim_revenue_through_ip_account(self, mock_transport, mock_wallet):
        """With an account the claim is wrapped in the account's execute call."""
        _registered(mock_transport)
        client = RoyaltyClient(mock_transport, mock_wallet)
        request = ClaimRevenueRequest(
            snapshot_ids=[1], token=TOKEN, royalty_vault_ip_id=RECEIVER_IP_ID, account=PAYER_IP_ID
        )
        response = asyncio.run(client.claim_revenue(request))
        assert response == {"tx_hash": mock_wallet.tx_hash.to_0x_hex()}
        sent = mock_wallet.sent[0]
        assert sent.to == PAYER_IP_ID
        assert sent.function_name_or_signature == "execute(address,uint256,bytes)"
        to, value, data = sent.args
        expected = IpRoyaltyVaultImplClient(mock_transport, mock_wallet, VAULT).claim_revenue_by_snapshot_batch_encode(
            snapshotIds=[1], token=TOKEN
        )
        assert (to, value) == (VAULT, 0)
        assert data == expected.data

    @pytest.mark.parametrize(
        "call",
        [
            lambda client: client.snapshot(SnapshotRequest(royalty_vault_ip_id=RECEIVER_IP_ID)),
            lambda client: client.claim_revenue(
                ClaimRevenueRequest(snapshot_ids=[1], token=TOKEN, royalty_vault_ip_id=RECEIVER_IP_ID)
            ),
            lambda client: client.pay_royalty_on_behalf(
                PayRoyaltyOnBehalfRequest(
                    receiver_ip_id=RECEIVER_IP_ID, payer_ip_id=PAYER_IP_ID, token=TOKEN, amount=1
                )
            ),
        ],
    )
    def test_writes_need_a_wallet(self, mock_transport, call):
        """Without a wallet the writes fail before reading the chain."""
        with pytest.raises(ValueError, match="wallet"):
            asyncio.run(call(RoyaltyClient(mock_transport)))
        assert not mock_transport.calls
