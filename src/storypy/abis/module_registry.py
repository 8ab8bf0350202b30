"""ABI and deployed addresses of the ModuleRegistry contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

MODULE_REGISTRY_ABI: ABI = cast(
    ABI,
    [
        {"inputs": [], "stateMutability": "nonpayable", "type": "constructor"},
        {"inputs": [], "name": "ModuleRegistry__InterfaceIdZero", "type": "error"},
        {"inputs": [], "name": "ModuleRegistry__ModuleAddressZeroAddress", "type": "error"},
        {"inputs": [], "name": "ModuleRegistry__ModuleNotRegistered", "type": "error"},
        {"inputs": [], "name": "ModuleRegistry__NameEmptyString", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "string", "name": "name", "type": "string"},
                {"indexed": True, "internalType": "address", "name": "module", "type": "address"},
                {"indexed": True, "internalType": "bytes4", "name": "moduleTypeInterfaceId", "type": "bytes4"},
                {"indexed": False, "internalType": "string", "name": "moduleType", "type": "string"},
            ],
            "name": "ModuleAdded",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "string", "name": "name", "type": "string"},
                {"indexed": True, "internalType": "address", "name": "module", "type": "address"},
            ],
            "name": "ModuleRemoved",
            "type": "event",
        },
        {
            "inputs": [{"internalType": "string", "name": "name", "type": "string"}],
            "name": "getModule",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "moduleAddress", "type": "address"}],
            "name": "getModuleType",
            "outputs": [{"internalType": "string", "name": "", "type": "string"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "string", "name": "moduleType", "type": "string"}],
            "name": "getModuleTypeInterfaceId",
            "outputs": [{"internalType": "bytes4", "name": "", "type": "bytes4"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "moduleAddress", "type": "address"}],
            "name": "isRegistered",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "string", "name": "name", "type": "string"},
                {"internalType": "address", "name": "moduleAddress", "type": "address"},
            ],
            "name": "registerModule",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "string", "name": "name", "type": "string"},
                {"internalType": "address", "name": "moduleAddress", "type": "address"},
                {"internalType": "string", "name": "moduleType", "type": "string"},
            ],
            "name": "registerModule",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "string", "name": "name", "type": "string"}],
            "name": "removeModule",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

MODULE_REGISTRY_ADDRESS: dict[int, str] = {
    1513: "0x022dbaaea5d8fb31a0ad793335e39ced5d631fa5",
}
