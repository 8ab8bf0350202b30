"""ABI and deployed addresses of the IPAccountImpl contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

IP_ACCOUNT_IMPL_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "accessController", "type": "address"},
                {"internalType": "address", "name": "ipAssetRegistry", "type": "address"},
                {"internalType": "address", "name": "licenseRegistry", "type": "address"},
                {"internalType": "address", "name": "moduleRegistry", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "IPAccount__ExpiredSignature", "type": "error"},
        {"inputs": [], "name": "IPAccount__InvalidCalldata", "type": "error"},
        {"inputs": [], "name": "IPAccount__InvalidSignature", "type": "error"},
        {"inputs": [], "name": "IPAccount__InvalidSigner", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"},
                {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
                {"indexed": False, "internalType": "bytes32", "name": "nonce", "type": "bytes32"},
            ],
            "name": "Executed",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"},
                {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
                {"indexed": False, "internalType": "bytes32", "name": "nonce", "type": "bytes32"},
                {"indexed": False, "internalType": "uint256", "name": "deadline", "type": "uint256"},
                {"indexed": True, "internalType": "address", "name": "signer", "type": "address"},
                {"indexed": False, "internalType": "bytes", "name": "signature", "type": "bytes"},
            ],
            "name": "ExecutedWithSig",
            "type": "event",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "to", "type": "address"},
                {"internalType": "uint256", "name": "value", "type": "uint256"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "execute",
            "outputs": [{"internalType": "bytes", "name": "result", "type": "bytes"}],
            "stateMutability": "payable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "to", "type": "address"},
                {"internalType": "uint256", "name": "value", "type": "uint256"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "uint256", "name": "deadline", "type": "uint256"},
                {"internalType": "bytes", "name": "signature", "type": "bytes"},
            ],
            "name": "executeWithSig",
            "outputs": [{"internalType": "bytes", "name": "result", "type": "bytes"}],
            "stateMutability": "payable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "isValidSigner",
            "outputs": [{"internalType": "bytes4", "name": "", "type": "bytes4"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "owner",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "state",
            "outputs": [{"internalType": "bytes32", "name": "result", "type": "bytes32"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "bytes4", "name": "interfaceId", "type": "bytes4"}],
            "name": "supportsInterface",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "token",
            "outputs": [
                {"internalType": "uint256", "name": "", "type": "uint256"},
                {"internalType": "address", "name": "", "type": "address"},
                {"internalType": "uint256", "name": "", "type": "uint256"},
            ],
            "stateMutability": "view",
            "type": "function",
        },
    ],
)

IP_ACCOUNT_IMPL_ADDRESS: dict[int, str] = {
    1513: "0x8f763c16753e830a8020c80f9f0131eb8ef52879",
}
