"""ABI and deployed addresses of the LicensingModule contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

LICENSING_MODULE_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "accessController", "type": "address"},
                {"internalType": "address", "name": "ipAccountRegistry", "type": "address"},
                {"internalType": "address", "name": "royaltyModule", "type": "address"},
                {"internalType": "address", "name": "registry", "type": "address"},
                {"internalType": "address", "name": "disputeModule", "type": "address"},
                {"internalType": "address", "name": "licenseToken", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "LicensingModule__DerivativesCannotAddLicenseTerms", "type": "error"},
        {
            "inputs": [
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "LicensingModule__LicenseTermsNotFound",
            "type": "error",
        },
        {"inputs": [], "name": "LicensingModule__MintAmountZero", "type": "error"},
        {"inputs": [], "name": "LicensingModule__NoParentIp", "type": "error"},
        {"inputs": [], "name": "LicensingModule__ReceiverZeroAddress", "type": "error"},
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "LicensingModule__DisputedIpId",
            "type": "error",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "caller", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "childIpId", "type": "address"},
                {"indexed": False, "internalType": "uint256[]", "name": "licenseTokenIds", "type": "uint256[]"},
                {"indexed": False, "internalType": "address[]", "name": "parentIpIds", "type": "address[]"},
                {"indexed": False, "internalType": "uint256[]", "name": "licenseTermsIds", "type": "uint256[]"},
                {"indexed": False, "internalType": "address", "name": "licenseTemplate", "type": "address"},
            ],
            "name": "DerivativeRegistered",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "caller", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "LicenseTermsAttached",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "internalType": "address", "name": "caller", "type": "address"},
                {"indexed": True, "internalType": "address", "name": "licensorIpId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"indexed": True, "internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
                {"indexed": False, "internalType": "uint256", "name": "amount", "type": "uint256"},
                {"indexed": False, "internalType": "address", "name": "receiver", "type": "address"},
                {"indexed": False, "internalType": "uint256", "name": "startLicenseTokenId", "type": "uint256"},
            ],
            "name": "LicenseTokensMinted",
            "type": "event",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "name": "attachLicenseTerms",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "licensorIpId", "type": "address"},
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
                {"internalType": "uint256", "name": "amount", "type": "uint256"},
                {"internalType": "address", "name": "receiver", "type": "address"},
                {"internalType": "bytes", "name": "royaltyContext", "type": "bytes"},
            ],
            "name": "mintLicenseTokens",
            "outputs": [{"internalType": "uint256", "name": "startLicenseTokenId", "type": "uint256"}],
            "stateMutability": "nonpayable",
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
                {"internalType": "address", "name": "childIpId", "type": "address"},
                {"internalType": "address[]", "name": "parentIpIds", "type": "address[]"},
                {"internalType": "uint256[]", "name": "licenseTermsIds", "type": "uint256[]"},
                {"internalType": "address", "name": "licenseTemplate", "type": "address"},
                {"internalType": "bytes", "name": "royaltyContext", "type": "bytes"},
            ],
            "name": "registerDerivative",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "childIpId", "type": "address"},
                {"internalType": "uint256[]", "name": "licenseTokenIds", "type": "uint256[]"},
                {"internalType": "bytes", "name": "royaltyContext", "type": "bytes"},
            ],
            "name": "registerDerivativeWithLicenseTokens",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

LICENSING_MODULE_ADDRESS: dict[int, str] = {
    1513: "0x5a7d9fa17de09350f481a53b470d798c1c1aabae",
}
