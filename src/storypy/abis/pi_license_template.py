"""ABI and deployed addresses of the PILicenseTemplate contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

# Programmable IP License terms, shared by the functions that take or return them
_PIL_TERMS_COMPONENTS = [
    {"internalType": "bool", "name": "transferable", "type": "bool"},
    {"internalType": "address", "name": "royaltyPolicy", "type": "address"},
    {"internalType": "uint256", "name": "mintingFee", "type": "uint256"},
    {"internalType": "uint256", "name": "expiration", "type": "uint256"},
    {"internalType": "bool", "name": "commercialUse", "type": "bool"},
    {"internalType": "bool", "name": "commercialAttribution", "type": "bool"},
    {"internalType": "address", "name": "commercializerChecker", "type": "address"},
    {"internalType": "bytes", "name": "commercializerCheckerData", "type": "bytes"},
    {"internalType": "uint32", "name": "commercialRevShare", "type": "uint32"},
    {"internalType": "uint256", "name": "commercialRevCelling", "type": "uint256"},
    {"internalType": "bool", "name": "derivativesAllowed", "type": "bool"},
    {"internalType": "bool", "name": "derivativesAttribution", "type": "bool"},
    {"internalType": "bool", "name": "derivativesApproval", "type": "bool"},
    {"internalType": "bool", "name": "derivativesReciprocal", "type": "bool"},
    {"internalType": "uint256", "name": "derivativeRevCelling", "type": "uint256"},
    {"internalType": "address", "name": "currency", "type": "address"},
    {"internalType": "string", "name": "uri", "type": "string"},
]

PI_LICENSE_TEMPLATE_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "accessController", "type": "address"},
                {"internalType": "address", "name": "ipAccountRegistry", "type": "address"},
                {"internalType": "address", "name": "licenseRegistry", "type": "address"},
                {"internalType": "address", "name": "royaltyModule", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "PILicenseTemplate__CommercialDisabled_CantAddAttribution", "type": "error"},
        {"inputs": [], "name": "PILicenseTemplate__CommercialDisabled_CantAddRevShare", "type": "error"},
        {"inputs": [], "name": "PILicenseTemplate__CurrencyTokenNotWhitelisted", "type": "error"},
        {"inputs": [], "name": "PILicenseTemplate__RoyaltyPolicyNotWhitelisted", "type": "error"},
        {"inputs": [], "name": "PILicenseTemplate__RoyaltyPolicyRequiresCurrencyToken", "type": "error"},
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
                {"indexed": True, "internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"indexed": False, "internalType": "bytes", "name": "licenseTerms", "type": "bytes"},
            ],
            "name": "LicenseTermsRegistered",
            "type": "event",
        },
        {
            "inputs": [{"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"}],
            "name": "exists",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
                {"internalType": "uint256", "name": "start", "type": "uint256"},
            ],
            "name": "getExpireTime",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "uint256", "name": "selectedLicenseTermsId", "type": "uint256"}],
            "name": "getLicenseTerms",
            "outputs": [
                {
                    "components": _PIL_TERMS_COMPONENTS,
                    "internalType": "struct PILTerms",
                    "name": "terms",
                    "type": "tuple",
                }
            ],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {
                    "components": _PIL_TERMS_COMPONENTS,
                    "internalType": "struct PILTerms",
                    "name": "terms",
                    "type": "tuple",
                }
            ],
            "name": "getLicenseTermsId",
            "outputs": [{"internalType": "uint256", "name": "selectedLicenseTermsId", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"}],
            "name": "getLicenseTermsURI",
            "outputs": [{"internalType": "string", "name": "", "type": "string"}],
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
                {
                    "components": _PIL_TERMS_COMPONENTS,
                    "internalType": "struct PILTerms",
                    "name": "terms",
                    "type": "tuple",
                }
            ],
            "name": "registerLicenseTerms",
            "outputs": [{"internalType": "uint256", "name": "id", "type": "uint256"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"}],
            "name": "toJson",
            "outputs": [{"internalType": "string", "name": "", "type": "string"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "totalRegisteredLicenseTerms",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
    ],
)

PI_LICENSE_TEMPLATE_ADDRESS: dict[int, str] = {
    1513: "0x58e2c909d557cd23ef90d14f8fd21667a5ae7a93",
}
