"""The entry point that wires a chain connection, a signer and every contract client together."""

from __future__ import annotations

import logging

from eth_account import Account
from web3 import Web3

from .base.abi import camel_to_snake
from .base.addresses import fetch_deployment_addresses_from_uri, resolve_address
from .base.transport import Web3Transport
from .base.wallet import LocalAccountWallet
from .base.web3_setup import initialize_web3_with_http_provider
from .clients import ContractClients, ContractEventClient
from .contracts import CONTRACT_CLIENTS
from .resources import DisputeClient, IPAccountClient, RoyaltyClient
from .story_config import StoryConfig


class StoryClient:
    """Clients for every protocol contract on one chain.

    Each contract is an attribute named after it, e.g. `story_client.dispute_module` or
    `story_client.license_token`. With a private key configured the attributes are write clients,
    otherwise read-only clients.

    Arguments
    ---------
    config: StoryConfig
        The chain connection and signer configuration.
    web3: Web3 | None, optional
        An existing web3 connection. Defaults to an http connection to `config.rpc_uri`.
    """

    def __init__(self, config: StoryConfig, web3: Web3 | None = None) -> None:
        self.config = config
        if web3 is None:
            web3 = initialize_web3_with_http_provider(config.rpc_uri)
        self.web3 = web3
        self.transport = Web3Transport(web3, poll_interval=config.poll_interval)

        self.wallet: LocalAccountWallet | None = None
        if config.private_key is not None:
            self.wallet = LocalAccountWallet(web3, Account.from_key(config.private_key))

        deployed_addresses = {}
        if config.artifacts_uri is not None:
            deployed_addresses = fetch_deployment_addresses_from_uri(config.artifacts_uri)
            logging.debug("Using deployed addresses from %s", config.artifacts_uri)

        self.contract_clients: dict[str, ContractEventClient] = {}
        for contract_name, clients in CONTRACT_CLIENTS.items():
            address = deployed_addresses.get(contract_name) or resolve_address(
                clients.client.address_table, config.chain_id
            )
            contract_client = self._build_contract_client(clients, address)
            self.contract_clients[contract_name] = contract_client
            setattr(self, camel_to_snake(contract_name), contract_client)

        self.dispute = DisputeClient(self.transport, self.wallet, self.contract_clients["DisputeModule"].address)
        self.ip_account = IPAccountClient(self.transport, self.wallet)
        self.royalty = RoyaltyClient(
            self.transport,
            self.wallet,
            royalty_module_address=self.contract_clients["RoyaltyModule"].address,
            royalty_policy_lap_address=self.contract_clients["RoyaltyPolicyLAP"].address,
            ip_asset_registry_address=self.contract_clients["IPAssetRegistry"].address,
        )

    @classmethod
    def new(cls, config: StoryConfig) -> StoryClient:
        """Create a client from a config.

        Arguments
        ---------
        config: StoryConfig
            The chain connection and signer configuration.

        Returns
        -------
        StoryClient
            The connected client.
        """
        return cls(config)

    def _build_contract_client(self, clients: ContractClients, address: str) -> ContractEventClient:
        if self.wallet is not None:
            return clients.client(self.transport, self.wallet, address)
        if clients.read_only_client is not None:
            return clients.read_only_client(self.transport, address)
        return clients.event_client(self.transport, address)
