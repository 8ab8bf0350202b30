"""ABI and deployed addresses of the LicenseRegistry contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

LICENSE_REGISTRY_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "licensingModule", "type": "address"},
                {"internalType": "address", "name": "disputeModule", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "LicenseRegistry__IpExpired",
            "type": "error",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "LicenseRegistry__LicenseTermsNotExists",
            "type": "error",
        },
        {"inputs": [], "name": "LicenseRegistry__CallerNotLicensingModule", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "expireTime", "type": "uint256"},
            ],
            "name": "ExpirationTimeSet",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [{"indexed": True, "internalType": "address", "name": "licenseTemplate", "type": "address"}],
            "name": "LicenseTemplateRegistered",
            "type": "event",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "exists",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "uint256", "name": "index", "type": "uint256"},
            ],
            "name": "getAttachedLicenseTerms",
            "outputs": [
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "getAttachedLicenseTermsCount",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "getDefaultLicenseTerms",
            "outputs": [
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "childIpId", "type": "address"}],
            "name": "getParentIpCount",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "getRoyaltyPercent",
            "outputs": [{"internalType": "uint32", "name": "royaltyPercent", "type": "uint32"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "hasIpAttachedLicenseTerms",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "childIpId", "type": "address"}],
            "name": "isDerivativeIp",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "isExpiredNow",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "licenseTemplate", "type": "address"}],
            "name": "isRegisteredLicenseTemplate",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
    ],
)

LICENSE_REGISTRY_ADDRESS: dict[int, str] = {
    1513: "0xedf8e338f05f7b1b857c3a8d3a0abb4bc2c41723",
}
