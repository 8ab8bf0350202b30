"""Higher level workflows built on the contract clients."""

from ._resource import ResourceClient, TxOptions
from .dispute import CancelDisputeRequest, DisputeClient, RaiseDisputeRequest, ResolveDisputeRequest, encode_dispute_tag
from .ip_account import IPAccountClient, IPAccountExecuteRequest, IPAccountExecuteWithSigRequest, TokenResponse
from .royalty import (
    ClaimableRevenueRequest,
    ClaimRevenueRequest,
    PayRoyaltyOnBehalfRequest,
    RoyaltyClient,
    SnapshotRequest,
)
