"""Contract clients generated from ABIs."""

from .contract_client import (
    ContractClient,
    ContractClients,
    ContractConfig,
    ContractEventClient,
    ContractReadOnlyClient,
    EncodedTxData,
    build_contract_clients,
)
from .requests import build_args, reshape_outputs
