"""ABI and deployed addresses of the RoyaltyPolicyLAP contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

ROYALTY_POLICY_LAP_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "royaltyModule", "type": "address"},
                {"internalType": "address", "name": "licensingModule", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "RoyaltyPolicyLAP__AboveAncestorsLimit", "type": "error"},
        {"inputs": [], "name": "RoyaltyPolicyLAP__AboveParentLimit", "type": "error"},
        {"inputs": [], "name": "RoyaltyPolicyLAP__AboveRoyaltyStackLimit", "type": "error"},
        {"inputs": [], "name": "RoyaltyPolicyLAP__NotRoyaltyModule", "type": "error"},
        {"inputs": [], "name": "RoyaltyPolicyLAP__UnlinkableToParents", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "ipRoyaltyVault", "type": "address"},
                {"indexed": False, "internalType": "uint32", "name": "royaltyStack", "type": "uint32"},
                {"indexed": False, "internalType": "address[]", "name": "targetAncestors", "type": "address[]"},
                {"indexed": False, "internalType": "uint32[]", "name": "targetRoyaltyAmount", "type": "uint32[]"},
            ],
            "name": "PolicyInitialized",
            "type": "event",
        },
        {
            "inputs": [],
            "name": "MAX_ANCESTORS",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "MAX_PARENTS",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "getRoyaltyData",
            "outputs": [
                {"internalType": "bool", "name": "", "type": "bool"},
                {"internalType": "address", "name": "", "type": "address"},
                {"internalType": "uint32", "name": "", "type": "uint32"},
                {"internalType": "address[]", "name": "", "type": "address[]"},
                {"internalType": "uint32[]", "name": "", "type": "uint32[]"},
            ],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "caller", "type": "address"},
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "address", "name": "token", "type": "address"},
                {"internalType": "uint256", "name": "amount", "type": "uint256"},
            ],
            "name": "onRoyaltyPayment",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

ROYALTY_POLICY_LAP_ADDRESS: dict[int, str] = {
    1513: "0x28b4f70ffe5ba7a26aef979226f77eb57fb9fdb6",
}
