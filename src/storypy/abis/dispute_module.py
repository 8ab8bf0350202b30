"""ABI and deployed addresses of the DisputeModule contract."""

from __future__ import annotations

from typing import cast

from eth_typing import ABI

DISPUTE_MODULE_ABI: ABI = cast(
    ABI,
    [
        {
            "inputs": [
                {"internalType": "address", "name": "accessController", "type": "address"},
                {"internalType": "address", "name": "ipAssetRegistry", "type": "address"},
                {"internalType": "address", "name": "licenseRegistry", "type": "address"},
            ],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {"inputs": [], "name": "DisputeModule__NotAbleToResolve", "type": "error"},
        {"inputs": [], "name": "DisputeModule__NotDisputeInitiator", "type": "error"},
        {"inputs": [], "name": "DisputeModule__NotInDisputeState", "type": "error"},
        {"inputs": [], "name": "DisputeModule__NotRegisteredIpId", "type": "error"},
        {"inputs": [], "name": "DisputeModule__NotWhitelistedArbitrationPolicy", "type": "error"},
        {"inputs": [], "name": "DisputeModule__NotWhitelistedArbitrationRelayer", "type": "error"},
        {"inputs": [], "name": "DisputeModule__NotWhitelistedDisputeTag", "type": "error"},
        {"inputs": [], "name": "DisputeModule__ZeroLinkToDisputeEvidence", "type": "error"},
        {"inputs": [], "name": "DisputeModule__ZeroArbitrationPolicy", "type": "error"},
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "AccessControlled__NotIpAccount",
            "type": "error",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "ipId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "arbitrationPolicy", "type": "address"},
                {
                    "indexed": False,
                    "internalType": "uint256",
                    "name": "nextArbitrationUpdateTimestamp",
                    "type": "uint256",
                },
            ],
            "name": "ArbitrationPolicySet",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "arbitrationPolicy", "type": "address"},
                {"indexed": False, "internalType": "bool", "name": "allowed", "type": "bool"},
            ],
            "name": "ArbitrationPolicyWhitelistUpdated",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "address", "name": "arbitrationPolicy", "type": "address"},
            ],
            "name": "DefaultArbitrationPolicyUpdated",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "uint256", "name": "disputeId", "type": "uint256"},
                {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "DisputeCancelled",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "uint256", "name": "disputeId", "type": "uint256"},
                {"indexed": False, "internalType": "bool", "name": "decision", "type": "bool"},
                {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "DisputeJudgementSet",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "uint256", "name": "disputeId", "type": "uint256"},
                {"indexed": False, "internalType": "address", "name": "targetIpId", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "disputeInitiator", "type": "address"},
                {"indexed": False, "internalType": "address", "name": "arbitrationPolicy", "type": "address"},
                {"indexed": False, "internalType": "string", "name": "linkToDisputeEvidence", "type": "string"},
                {"indexed": False, "internalType": "bytes32", "name": "targetTag", "type": "bytes32"},
                {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "DisputeRaised",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "uint256", "name": "disputeId", "type": "uint256"},
            ],
            "name": "DisputeResolved",
            "type": "event",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": False, "internalType": "bytes32", "name": "tag", "type": "bytes32"},
                {"indexed": False, "internalType": "bool", "name": "allowed", "type": "bool"},
            ],
            "name": "TagWhitelistUpdated",
            "type": "event",
        },
        {
            "inputs": [],
            "name": "baseArbitrationPolicy",
            "outputs": [{"internalType": "address", "name": "", "type": "address"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "disputeId", "type": "uint256"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "cancelDispute",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [],
            "name": "disputeCounter",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "uint256", "name": "disputeId", "type": "uint256"}],
            "name": "disputes",
            "outputs": [
                {"internalType": "address", "name": "targetIpId", "type": "address"},
                {"internalType": "address", "name": "disputeInitiator", "type": "address"},
                {"internalType": "address", "name": "arbitrationPolicy", "type": "address"},
                {"internalType": "string", "name": "linkToDisputeEvidence", "type": "string"},
                {"internalType": "bytes32", "name": "targetTag", "type": "bytes32"},
                {"internalType": "bytes32", "name": "currentTag", "type": "bytes32"},
                {"internalType": "uint256", "name": "parentDisputeId", "type": "uint256"},
            ],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "ipId", "type": "address"}],
            "name": "isIpTagged",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "address", "name": "arbitrationPolicy", "type": "address"}],
            "name": "isWhitelistedArbitrationPolicy",
            "outputs": [{"internalType": "bool", "name": "allowed", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [{"internalType": "bytes32", "name": "tag", "type": "bytes32"}],
            "name": "isWhitelistedDisputeTag",
            "outputs": [{"internalType": "bool", "name": "allowed", "type": "bool"}],
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
                {"internalType": "address", "name": "targetIpId", "type": "address"},
                {"internalType": "string", "name": "linkToDisputeEvidence", "type": "string"},
                {"internalType": "bytes32", "name": "targetTag", "type": "bytes32"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "raiseDispute",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "disputeId", "type": "uint256"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "resolveDispute",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "ipId", "type": "address"},
                {"internalType": "address", "name": "arbitrationPolicy", "type": "address"},
            ],
            "name": "setArbitrationPolicy",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "uint256", "name": "disputeId", "type": "uint256"},
                {"internalType": "bool", "name": "decision", "type": "bool"},
                {"internalType": "bytes", "name": "data", "type": "bytes"},
            ],
            "name": "setDisputeJudgement",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "parentIpId", "type": "address"},
                {"internalType": "address", "name": "derivativeIpId", "type": "address"},
                {"internalType": "uint256", "name": "parentDisputeId", "type": "uint256"},
            ],
            "name": "tagDerivativeIfParentInfringed",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "bytes32", "name": "tag", "type": "bytes32"},
                {"internalType": "bool", "name": "allowed", "type": "bool"},
            ],
            "name": "whitelistDisputeTag",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
)

DISPUTE_MODULE_ADDRESS: dict[int, str] = {
    1513: "0xeb7b1dd43b81a7be1fa427515a2b173b454a9832",
}
