"""Python clients for the deployed IP asset protocol contracts."""

from .base import (
    HASH_ZERO,
    UNRESOLVED_ADDRESS,
    ZERO_ADDRESS,
    ContractCallException,
    ContractCallType,
    LocalAccountWallet,
    Web3Transport,
)
from .clients import (
    ContractClient,
    ContractConfig,
    ContractEventClient,
    ContractReadOnlyClient,
    EncodedTxData,
    build_contract_clients,
)
from .resources import (
    CancelDisputeRequest,
    ClaimableRevenueRequest,
    ClaimRevenueRequest,
    DisputeClient,
    IPAccountClient,
    IPAccountExecuteRequest,
    IPAccountExecuteWithSigRequest,
    PayRoyaltyOnBehalfRequest,
    RaiseDisputeRequest,
    ResolveDisputeRequest,
    RoyaltyClient,
    SnapshotRequest,
    TokenResponse,
    TxOptions,
)
from .story_client import StoryClient
from .story_config import StoryConfig, build_story_config
