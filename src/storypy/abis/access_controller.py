"""ABI and deployed addresses of the AccessController contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

ACCESS_CONTROLLER_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "ipAccountRegistry", "type": "address"},
                {"internalType": "address", "name": "moduleRegistry", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "AccessController__CallerIsNotIPAccountOrOwner", "type": "error"},
        {
            "inputs": [{"internalType": "address", "name": "ipAccount", "type": "address"}],
            "name": "AccessController__IPAccountIsNotValid",
            "type": "error",
        },
        {"inputs": [], "name": "AccessController__IPAccountIsZeroAddress", "type": "error"},
        {
            "inputs": [
                {"internalType": "address", "name": "ipAccount", "type": "address"},
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "address", "name": "to", "type": "address"},
                {"internalType": "bytes4", "name": "func", "type": "bytes4"},
            ],
            "name": "AccessController__PermissionDenied",
            "type": "error",
        },
        {"inputs": [], "name": "AccessController__PermissionIsNotValid", "type": "error"},
        {"inputs": [], "name": "AccessController__SignerIsZeroAddress", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "ipAccountOwner", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "ipAccount", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "signer", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
                {"indexed": False, "internalType": "bytes4", "name": "func", "type": "bytes4"},
                {"indexed": False, "internalType": "uint8", "name": "permission", "type": "uint8"},
            ],
            "name": "PermissionSet",
            "type": "event",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipAccount", "type": "address"},
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "address", "name": "to", "type": "address"},
                {"internalType": "bytes4", "name": "func", "type": "bytes4"},
            ],
            "name": "checkPermission",
            "outputs": [],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipAccount", "type": "address"},
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "address", "name": "to", "type": "address"},
                {"internalType": "bytes4", "name": "func", "type": "bytes4"},
            ],
            "name": "getPermission",
            "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipAccount", "type": "address"},
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "uint8", "name": "permission", "type": "uint8"},
            ],
            "name": "setAllPermissions",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {
                    "components": [
                        {"internalType": "address", "name": "ipAccount", "type": "address"},
                        {"internalType": "address", "name": "signer", "type": "address"},
                        {"internalType": "address", "name": "to", "type": "address"},
                        {"internalType": "bytes4", "name": "func", "type": "bytes4"},
                        {"internalType": "uint8", "name": "permission", "type": "uint8"},
                    ],
                    "internalType": "struct AccessPermission.Permission[]",
                    "name": "permissions",
                    "type": "tuple[]",
                }
            ],
            "name": "setBatchPermissions",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipAccount", "type": "address"},
                {"internalType": "address", "name": "signer", "type": "address"},
                {"internalType": "address", "name": "to", "type": "address"},
                {"internalType": "bytes4", "name": "func", "type": "bytes4"},
                {"internalType": "uint8", "name": "permission", "type": "uint8"},
            ],
            "name": "setPermission",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

ACCESS_CONTROLLER_ADDRESS: dict[int, str] = {
    1513: "0xccf37d0a503ee1d4c11208672e622ed3dfb2275a",
}
