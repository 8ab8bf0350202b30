"""ABI and deployed addresses of the SPG (Story Protocol Gateway) contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

_IP_METADATA = {
    "components": [
        {"internalType": "string", "name": "metadataURI", "type": "string"},
        {"internalType": "bytes32", "name": "metadataHash", "type": "bytes32"},
        {"internalType": "bytes32", "name": "nftMetadataHash", "type": "bytes32"},
    ],
    "internalType": "struct ISPG.IPMetadata",
    "name": "metadata",
    "type": "tuple",
}


def _signature_data(name: str) -> dict:
    return {
        "components": [
            {"internalType": "address", "name": "signer", "type": "address"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"},
            {"internalType": "bytes", "name": "signature", "type": "bytes"},
        ],
        "internalType": "struct ISPG.SignatureData",
        "name": name,
        "type": "tuple",
    }


_PIL_TERMS = {
    "components": [
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
    ],
    "internalType": "struct PILTerms",
    "name": "terms",
    "type": "tuple",
}

_MAKE_DERIVATIVE = {
    "components": [
        {"internalType": "address[]", "name": "parentIpIds", "type": "address[]"},
        {"internalType": "address", "name": "licenseTemplate", "type": "address"},
        {"internalType": "uint256[]", "name": "licenseTermsIds", "type": "uint256[]"},
        {"internalType": "bytes", "name": "royaltyContext", "type": "bytes"},
    ],
    "internalType": "struct ISPG.MakeDerivative",
    "name": "derivData",
    "type": "tuple",
}

SPG_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "accessController", "type": "address"},
                {"internalType": "address", "name": "ipAssetRegistry", "type": "address"},
                {"internalType": "address", "name": "licensingModule", "type": "address"},
                {"internalType": "address", "name": "licenseRegistry", "type": "address"},
                {"internalType": "address", "name": "pilTemplate", "type": "address"},
                {"internalType": "address", "name": "licenseToken", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "SPG__CallerAndNotAuthorized", "type": "error"},
        {"inputs": [], "name": "SPG__CallerNotMinterRole", "type": "error"},
        {"inputs": [], "name": "SPG__EmptyLicenseTokens", "type": "error"},
        {"inputs": [], "name": "SPG__ZeroAddressParam", "type": "error"},
        {
            "anonymous": False,
            "inputs": [{"indexed": True, "internalType": "address", "name": "nftContract", "type": "address"}],
            "name": "CollectionCreated",
            "type": "event",
        },
        {
            "inputs": [
                {"internalType": "string", "name": "name", "type": "string"},
                {"internalType": "string", "name": "symbol", "type": "string"},
                {"internalType": "uint32", "name": "maxSupply", "type": "uint32"},
                {"internalType": "uint256", "name": "mintFee", "type": "uint256"},
                {"internalType": "address", "name": "mintFeeToken", "type": "address"},
                {"internalType": "address", "name": "owner", "type": "address"},
            ],
            "name": "createCollection",
            "outputs": [{"internalType": "address", "name": "nftContract", "type": "address"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "getSPGNFTBeacon",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "nftContract", "type": "address"},
                {"internalType": "address", "name": "recipient", "type": "address"},
                _IP_METADATA,
            ],
            "name": "mintAndRegisterIp",
            "outputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "nftContract", "type": "address"},
                {"internalType": "address", "name": "recipient", "type": "address"},
                _IP_METADATA,
                _PIL_TERMS,
            ],
            "name": "mintAndRegisterIpAndAttachPILTerms",
            "outputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "nftContract", "type": "address"},
                _MAKE_DERIVATIVE,
                _IP_METADATA,
                {"internalType": "address", "name": "recipient", "type": "address"},
            ],
            "name": "mintAndRegisterIpAndMakeDerivative",
            "outputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            ],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "nftContract", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
                _IP_METADATA,
                _signature_data("sigMetadata"),
            ],
            "name": "registerIp",
            "outputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "nftContract", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
                _IP_METADATA,
                _PIL_TERMS,
                _signature_data("sigMetadata"),
                _signature_data("sigAttach"),
            ],
            "name": "registerIpAndAttachPILTerms",
            "outputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "uint256", "name": "licenseTermsId", "type": "uint256"},
            ],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "nftContract", "type": "address"},
                {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
                _MAKE_DERIVATIVE,
                _IP_METADATA,
                _signature_data("sigMetadata"),
                _signature_data("sigRegister"),
            ],
            "name": "registerIpAndMakeDerivative",
            "outputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

SPG_ADDRESS: dict[int, str] = {
    1513: "0x69415ce984a79a3cfbe3f51024c63b6c107331e3",
}
