"""ABI and deployed addresses of the IPAssetRegistry contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

IP_ASSET_REGISTRY_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "erc6551Registry", "type": "address"},
                {"internalType": "address", "name": "ipAccountImpl", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "IPAssetRegistry__AlreadyRegistered", "type": "error"},
        {
            "inputs": [
                {"internalType": "address", "name": "contractAddress", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "name": "IPAssetRegistry__InvalidToken",
            "type": "error",
        },
        {
            "inputs": [{"internalType": "address", "name": "contractAddress", "type": "address"}],
            "name": "IPAssetRegistry__UnsupportedIERC721",
            "type": "error",
        },
        {
            "inputs": [{"internalType": "address", "name": "contractAddress", "type": "address"}],
            "name": "IPAssetRegistry__UnsupportedIERC721Metadata",
            "type": "error",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "account", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "implementation", "type": "address"},
                {"indexed": True, "internalType": "uint256", "name": "chainId", "type": "uint256"},
                {"indexed": False, "internalType": "address", "name": "tokenContract", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "name": "IPAccountRegistered",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": True, "internalType": "uint256", "name": "chainId", "type": "uint256"},
                {"indexed": True, "internalType": "address", "name": "tokenContract", "type": "address"},
                {"indexed": True, "internalType": "uint256", "name": "tokenId", "type": "uint256"},
                {"indexed": False, "internalType": "string", "name": "name", "type": "string"},
                {"indexed": False, "internalType": "string", "name": "uri", "type": "string"},
                {"indexed": False, "internalType": "uint256", "name": "registrationDate", "type": "uint256"},
            ],
            "name": "IPRegistered",
            "type": "event",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "chainId", "type": "uint256"},
                {"internalType": "address", "name": "tokenContract", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "name": "ipAccount",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "chainId", "type": "uint256"},
                {"internalType": "address", "name": "tokenContract", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "name": "ipId",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "id", "type": "address"}],
            "name": "isRegistered",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "chainid", "type": "uint256"},
                {"internalType": "address", "name": "tokenContract", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "name": "register",
            "outputs": [{"internalType": "address", "name": "id", "type": "address"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "totalSupply",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
    ],
)

IP_ASSET_REGISTRY_ADDRESS: dict[int, str] = {
    1513: "0x1a9d0d28a0422f26d31be72edc6f13ea4371e11b",
}
