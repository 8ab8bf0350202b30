"""ABI and deployed addresses of the CoreMetadataModule contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

CORE_METADATA_MODULE_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "accessController", "type": "address"},
                {"internalType": "address", "name": "ipAccountRegistry", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "CoreMetadataModule__MetadataAlreadyFrozen", "type": "error"},
        {
            "inputs": [{"internalType": "address", "name": "ipAccount", "type": "address"}],
            "name": "AccessControlled__NotIpAccount",
            "type": "error",
        },
        {
            "anonymous": False,
            "inputs": [{"indexed": True, "internalType": "address", "name": "ipId", "type": "address"}],
            "name": "MetadataFrozen",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": False, "internalType": "string", "name": "metadataURI", "type": "string"},
                {"indexed": False, "internalType": "bytes32", "name": "metadataHash", "type": "bytes32"},
            ],
            "name": "MetadataURISet",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": False, "internalType": "string", "name": "nftTokenURI", "type": "string"},
                {"indexed": False, "internalType": "bytes32", "name": "nftMetadataHash", "type": "bytes32"},
            ],
            "name": "NFTTokenURISet",
            "type": "event",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "freezeMetadata",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "isMetadataFrozen",
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
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "string", "name": "metadataURI", "type": "string"},
                {"internalType": "bytes32", "name": "metadataHash", "type": "bytes32"},
                {"internalType": "bytes32", "name": "nftMetadataHash", "type": "bytes32"},
            ],
            "name": "setAll",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "string", "name": "metadataURI", "type": "string"},
                {"internalType": "bytes32", "name": "metadataHash", "type": "bytes32"},
            ],
            "name": "setMetadataURI",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "bytes32", "name": "nftMetadataHash", "type": "bytes32"},
            ],
            "name": "updateNftTokenURI",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

CORE_METADATA_MODULE_ADDRESS: dict[int, str] = {
    1513: "0xdae11663438a0958e7075f604e3a5eee77fd3878",
}
