"""ABI and deployed addresses of the IpRoyaltyVaultImpl contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

IP_ROYALTY_VAULT_IMPL_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "royaltyPolicyLAP", "type": "address"},
                {"internalType": "address", "name": "disputeModule", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "IpRoyaltyVault__AlreadyClaimed", "type": "error"},
        {"inputs": [], "name": "IpRoyaltyVault__ClaimerNotAnAncestor", "type": "error"},
        {"inputs": [], "name": "IpRoyaltyVault__IpTagged", "type": "error"},
        {"inputs": [], "name": "IpRoyaltyVault__NoClaimableTokens", "type": "error"},
        {"inputs": [], "name": "IpRoyaltyVault__SnapshotIntervalTooShort", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "claimer", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "token", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "amount", "type": "uint256"},
            ],
            "name": "RevenueTokenClaimed",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "ancestorIpId", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "royaltyTokensCollected", "type": "uint256"},
            ],
            "name": "RoyaltyTokensCollected",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "uint256", "name": "snapshotId", "type": "uint256"},
                {"indexed": False, "internalType": "uint256", "name": "snapshotTimestamp", "type": "uint256"},
                {"indexed": False, "internalType": "uint32", "name": "unclaimedTokens", "type": "uint32"},
            ],
            "name": "SnapshotCompleted",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "from", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"},
            ],
            "name": "Transfer",
            "type": "event",
        },
        {
            "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
            "name": "balanceOf",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "snapshotId", "type": "uint256"},
                {"internalType": "address[]", "name": "tokenList", "type": "address[]"},
            ],
            "name": "claimRevenueByTokenBatch",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256[]", "name": "snapshotIds", "type": "uint256[]"},
                {"internalType": "address", "name": "token", "type": "address"},
            ],
            "name": "claimRevenueBySnapshotBatch",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "account", "type": "address"},
                {"internalType": "uint256", "name": "snapshotId", "type": "uint256"},
                {"internalType": "address", "name": "token", "type": "address"},
            ],
            "name": "claimableRevenue",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ancestorIpId", "type": "address"}],
            "name": "collectRoyaltyTokens",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "ipId",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "snapshot",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "tokens",
            "outputs": [{"internalType": "address[]", "name": "", "type": "address[]"}],
            "stateMutability": "view",
            "type": "function",
        },
    ],
)

IP_ROYALTY_VAULT_IMPL_ADDRESS: dict[int, str] = {
    1513: "0xfb5b5b61c9a437e06ba87367aabf3766d091e3d1",
}
