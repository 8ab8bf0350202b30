"""ABI and deployed addresses of the RoyaltyModule contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

ROYALTY_MODULE_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "licensingModule", "type": "address"},
                {"internalType": "address", "name": "disputeModule", "type": "address"},
                {"internalType": "address", "name": "licenseRegistry", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "RoyaltyModule__IpIsTagged", "type": "error"},
        {"inputs": [], "name": "RoyaltyModule__NoRoyaltyPolicySet", "type": "error"},
        {"inputs": [], "name": "RoyaltyModule__NotAllowedCaller", "type": "error"},
        {"inputs": [], "name": "RoyaltyModule__NotWhitelistedRoyaltyPolicy", "type": "error"},
        {"inputs": [], "name": "RoyaltyModule__NotWhitelistedRoyaltyToken", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "receiverIpId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "payerAddress", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "token", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "amount", "type": "uint256"},
            ],
            "name": "LicenseMintingFeePaid",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "receiverIpId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "payerIpId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "sender", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "token", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "amount", "type": "uint256"},
            ],
            "name": "RoyaltyPaid",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "royaltyPolicy", "type": "address"},
                {"indexed": False, "internalType": "bool", "name": "allowed", "type": "bool"},
            ],
            "name": "RoyaltyPolicyWhitelistUpdated",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "token", "type": "address"},
                {"indexed": False, "internalType": "bool", "name": "allowed", "type": "bool"},
            ],
            "name": "RoyaltyTokenWhitelistUpdated",
            "type": "event",
        },
        {
            "inputs": [{"internalType": "address", "name": "royaltyPolicy", "type": "address"}],
            "name": "isWhitelistedRoyaltyPolicy",
            "outputs": [{"internalType": "bool", "name": "isWhitelisted", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "token", "type": "address"}],
            "name": "isWhitelistedRoyaltyToken",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "name",
            "outputs": [{"internalType": "string", "name": "", "type": "string"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "receiverIpId", "type": "address"},
                {"internalType": "address", "name": "payerIpId", "type": "address"},
                {"internalType": "address", "name": "token", "type": "address"},
                {"internalType": "uint256", "name": "amount", "type": "uint256"},
            ],
            "name": "payRoyaltyOnBehalf",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "royaltyPolicies",
            "outputs": [{"internalType": "address", "name": "royaltyPolicy", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
    ],
)

ROYALTY_MODULE_ADDRESS: dict[int, str] = {
    1513: "0xea6ed700b11dff703665ccaf55887ca56134ae3b",
}
