"""Client classes and configs for every deployed contract of the protocol.

Each contract gets an event client, a read-only client and a client that can write, all generated from
the contract's ABI by `build_contract_clients`.
"""

from __future__ import annotations

from .abis import (
    ACCESS_CONTROLLER_ABI,
    ACCESS_CONTROLLER_ADDRESS,
    CORE_METADATA_MODULE_ABI,
    CORE_METADATA_MODULE_ADDRESS,
    DISPUTE_MODULE_ABI,
    DISPUTE_MODULE_ADDRESS,
    IP_ACCOUNT_IMPL_ABI,
    IP_ACCOUNT_IMPL_ADDRESS,
    IP_ASSET_REGISTRY_ABI,
    IP_ASSET_REGISTRY_ADDRESS,
    IP_ROYALTY_VAULT_IMPL_ABI,
    IP_ROYALTY_VAULT_IMPL_ADDRESS,
    LICENSE_REGISTRY_ABI,
    LICENSE_REGISTRY_ADDRESS,
    LICENSE_TOKEN_ABI,
    LICENSE_TOKEN_ADDRESS,
    LICENSING_MODULE_ABI,
    LICENSING_MODULE_ADDRESS,
    MODULE_REGISTRY_ABI,
    MODULE_REGISTRY_ADDRESS,
    PI_LICENSE_TEMPLATE_ABI,
    PI_LICENSE_TEMPLATE_ADDRESS,
    ROYALTY_MODULE_ABI,
    ROYALTY_MODULE_ADDRESS,
    ROYALTY_POLICY_LAP_ABI,
    ROYALTY_POLICY_LAP_ADDRESS,
    SPG_ABI,
    SPG_ADDRESS,
    SPGNFT_BEACON_ABI,
    SPGNFT_BEACON_ADDRESS,
    SPGNFT_IMPL_ABI,
    SPGNFT_IMPL_ADDRESS,
)
from .base.abi import ContractAbi
from .base.addresses import resolve_address
from .clients import ContractClients, ContractConfig, build_contract_clients

# The chain the built-in address tables are deployed on
DEFAULT_CHAIN_ID = 1513


def _contract_config(abi: ContractAbi, address_table: dict[int, str]) -> ContractConfig:
    return ContractConfig(address=resolve_address(address_table, DEFAULT_CHAIN_ID), abi=abi)


# AccessController
ACCESS_CONTROLLER_CLIENTS = build_contract_clients("AccessController", ACCESS_CONTROLLER_ABI, ACCESS_CONTROLLER_ADDRESS)
AccessControllerEventClient, AccessControllerReadOnlyClient, AccessControllerClient = ACCESS_CONTROLLER_CLIENTS
ACCESS_CONTROLLER_CONFIG = _contract_config(AccessControllerClient.abi, ACCESS_CONTROLLER_ADDRESS)

# CoreMetadataModule
CORE_METADATA_MODULE_CLIENTS = build_contract_clients(
    "CoreMetadataModule", CORE_METADATA_MODULE_ABI, CORE_METADATA_MODULE_ADDRESS
)
CoreMetadataModuleEventClient, CoreMetadataModuleReadOnlyClient, CoreMetadataModuleClient = CORE_METADATA_MODULE_CLIENTS
CORE_METADATA_MODULE_CONFIG = _contract_config(CoreMetadataModuleClient.abi, CORE_METADATA_MODULE_ADDRESS)

# DisputeModule
DISPUTE_MODULE_CLIENTS = build_contract_clients("DisputeModule", DISPUTE_MODULE_ABI, DISPUTE_MODULE_ADDRESS)
DisputeModuleEventClient, DisputeModuleReadOnlyClient, DisputeModuleClient = DISPUTE_MODULE_CLIENTS
DISPUTE_MODULE_CONFIG = _contract_config(DisputeModuleClient.abi, DISPUTE_MODULE_ADDRESS)

# IPAccountImpl
IP_ACCOUNT_IMPL_CLIENTS = build_contract_clients("IPAccountImpl", IP_ACCOUNT_IMPL_ABI, IP_ACCOUNT_IMPL_ADDRESS)
IPAccountImplEventClient, IPAccountImplReadOnlyClient, IPAccountImplClient = IP_ACCOUNT_IMPL_CLIENTS
IP_ACCOUNT_IMPL_CONFIG = _contract_config(IPAccountImplClient.abi, IP_ACCOUNT_IMPL_ADDRESS)

# IPAssetRegistry
IP_ASSET_REGISTRY_CLIENTS = build_contract_clients("IPAssetRegistry", IP_ASSET_REGISTRY_ABI, IP_ASSET_REGISTRY_ADDRESS)
IPAssetRegistryEventClient, IPAssetRegistryReadOnlyClient, IPAssetRegistryClient = IP_ASSET_REGISTRY_CLIENTS
IP_ASSET_REGISTRY_CONFIG = _contract_config(IPAssetRegistryClient.abi, IP_ASSET_REGISTRY_ADDRESS)

# IpRoyaltyVaultImpl
IP_ROYALTY_VAULT_IMPL_CLIENTS = build_contract_clients(
    "IpRoyaltyVaultImpl", IP_ROYALTY_VAULT_IMPL_ABI, IP_ROYALTY_VAULT_IMPL_ADDRESS
)
(
    IpRoyaltyVaultImplEventClient,
    IpRoyaltyVaultImplReadOnlyClient,
    IpRoyaltyVaultImplClient,
) = IP_ROYALTY_VAULT_IMPL_CLIENTS
IP_ROYALTY_VAULT_IMPL_CONFIG = _contract_config(IpRoyaltyVaultImplClient.abi, IP_ROYALTY_VAULT_IMPL_ADDRESS)

# LicenseRegistry
LICENSE_REGISTRY_CLIENTS = build_contract_clients("LicenseRegistry", LICENSE_REGISTRY_ABI, LICENSE_REGISTRY_ADDRESS)
LicenseRegistryEventClient, LicenseRegistryReadOnlyClient, LicenseRegistryClient = LICENSE_REGISTRY_CLIENTS
LICENSE_REGISTRY_CONFIG = _contract_config(LicenseRegistryClient.abi, LICENSE_REGISTRY_ADDRESS)

# LicenseToken
LICENSE_TOKEN_CLIENTS = build_contract_clients("LicenseToken", LICENSE_TOKEN_ABI, LICENSE_TOKEN_ADDRESS)
LicenseTokenEventClient, LicenseTokenReadOnlyClient, LicenseTokenClient = LICENSE_TOKEN_CLIENTS
LICENSE_TOKEN_CONFIG = _contract_config(LicenseTokenClient.abi, LICENSE_TOKEN_ADDRESS)

# LicensingModule
LICENSING_MODULE_CLIENTS = build_contract_clients("LicensingModule", LICENSING_MODULE_ABI, LICENSING_MODULE_ADDRESS)
LicensingModuleEventClient, LicensingModuleReadOnlyClient, LicensingModuleClient = LICENSING_MODULE_CLIENTS
LICENSING_MODULE_CONFIG = _contract_config(LicensingModuleClient.abi, LICENSING_MODULE_ADDRESS)

# ModuleRegistry
MODULE_REGISTRY_CLIENTS = build_contract_clients("ModuleRegistry", MODULE_REGISTRY_ABI, MODULE_REGISTRY_ADDRESS)
ModuleRegistryEventClient, ModuleRegistryReadOnlyClient, ModuleRegistryClient = MODULE_REGISTRY_CLIENTS
MODULE_REGISTRY_CONFIG = _contract_config(ModuleRegistryClient.abi, MODULE_REGISTRY_ADDRESS)

# PiLicenseTemplate
PI_LICENSE_TEMPLATE_CLIENTS = build_contract_clients(
    "PiLicenseTemplate", PI_LICENSE_TEMPLATE_ABI, PI_LICENSE_TEMPLATE_ADDRESS
)
PiLicenseTemplateEventClient, PiLicenseTemplateReadOnlyClient, PiLicenseTemplateClient = PI_LICENSE_TEMPLATE_CLIENTS
PI_LICENSE_TEMPLATE_CONFIG = _contract_config(PiLicenseTemplateClient.abi, PI_LICENSE_TEMPLATE_ADDRESS)

# RoyaltyModule
ROYALTY_MODULE_CLIENTS = build_contract_clients("RoyaltyModule", ROYALTY_MODULE_ABI, ROYALTY_MODULE_ADDRESS)
RoyaltyModuleEventClient, RoyaltyModuleReadOnlyClient, RoyaltyModuleClient = ROYALTY_MODULE_CLIENTS
ROYALTY_MODULE_CONFIG = _contract_config(RoyaltyModuleClient.abi, ROYALTY_MODULE_ADDRESS)

# RoyaltyPolicyLAP
ROYALTY_POLICY_LAP_CLIENTS = build_contract_clients(
    "RoyaltyPolicyLAP", ROYALTY_POLICY_LAP_ABI, ROYALTY_POLICY_LAP_ADDRESS
)
RoyaltyPolicyLAPEventClient, RoyaltyPolicyLAPReadOnlyClient, RoyaltyPolicyLAPClient = ROYALTY_POLICY_LAP_CLIENTS
ROYALTY_POLICY_LAP_CONFIG = _contract_config(RoyaltyPolicyLAPClient.abi, ROYALTY_POLICY_LAP_ADDRESS)

# SPG
SPG_CLIENTS = build_contract_clients("SPG", SPG_ABI, SPG_ADDRESS)
SPGEventClient, SPGReadOnlyClient, SPGClient = SPG_CLIENTS
SPG_CONFIG = _contract_config(SPGClient.abi, SPG_ADDRESS)

# SpgnftBeacon
SPGNFT_BEACON_CLIENTS = build_contract_clients("SpgnftBeacon", SPGNFT_BEACON_ABI, SPGNFT_BEACON_ADDRESS)
SpgnftBeaconEventClient, SpgnftBeaconReadOnlyClient, SpgnftBeaconClient = SPGNFT_BEACON_CLIENTS
SPGNFT_BEACON_CONFIG = _contract_config(SpgnftBeaconClient.abi, SPGNFT_BEACON_ADDRESS)

# SpgnftImpl
SPGNFT_IMPL_CLIENTS = build_contract_clients("SpgnftImpl", SPGNFT_IMPL_ABI, SPGNFT_IMPL_ADDRESS)
SpgnftImplEventClient, SpgnftImplReadOnlyClient, SpgnftImplClient = SPGNFT_IMPL_CLIENTS
SPGNFT_IMPL_CONFIG = _contract_config(SpgnftImplClient.abi, SPGNFT_IMPL_ADDRESS)

# Generated classes keyed by contract name, the names used by deployment artifacts
CONTRACT_CLIENTS: dict[str, ContractClients] = {
    "AccessController": ACCESS_CONTROLLER_CLIENTS,
    "CoreMetadataModule": CORE_METADATA_MODULE_CLIENTS,
    "DisputeModule": DISPUTE_MODULE_CLIENTS,
    "IPAccountImpl": IP_ACCOUNT_IMPL_CLIENTS,
    "IPAssetRegistry": IP_ASSET_REGISTRY_CLIENTS,
    "IpRoyaltyVaultImpl": IP_ROYALTY_VAULT_IMPL_CLIENTS,
    "LicenseRegistry": LICENSE_REGISTRY_CLIENTS,
    "LicenseToken": LICENSE_TOKEN_CLIENTS,
    "LicensingModule": LICENSING_MODULE_CLIENTS,
    "ModuleRegistry": MODULE_REGISTRY_CLIENTS,
    "PiLicenseTemplate": PI_LICENSE_TEMPLATE_CLIENTS,
    "RoyaltyModule": ROYALTY_MODULE_CLIENTS,
    "RoyaltyPolicyLAP": ROYALTY_POLICY_LAP_CLIENTS,
    "SPG": SPG_CLIENTS,
    "SpgnftBeacon": SPGNFT_BEACON_CLIENTS,
    "SpgnftImpl": SPGNFT_IMPL_CLIENTS,
}
