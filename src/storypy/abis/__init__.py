"""ABIs and per-chain deployed addresses of the Story Protocol contracts."""

from .access_controller import ACCESS_CONTROLLER_ABI, ACCESS_CONTROLLER_ADDRESS
from .core_metadata_module import CORE_METADATA_MODULE_ABI, CORE_METADATA_MODULE_ADDRESS
from .dispute_module import DISPUTE_MODULE_ABI, DISPUTE_MODULE_ADDRESS
from .ip_account_impl import IP_ACCOUNT_IMPL_ABI, IP_ACCOUNT_IMPL_ADDRESS
from .ip_asset_registry import IP_ASSET_REGISTRY_ABI, IP_ASSET_REGISTRY_ADDRESS
from .ip_royalty_vault_impl import IP_ROYALTY_VAULT_IMPL_ABI, IP_ROYALTY_VAULT_IMPL_ADDRESS
from .license_registry import LICENSE_REGISTRY_ABI, LICENSE_REGISTRY_ADDRESS
from .license_token import LICENSE_TOKEN_ABI, LICENSE_TOKEN_ADDRESS
from .licensing_module import LICENSING_MODULE_ABI, LICENSING_MODULE_ADDRESS
from .module_registry import MODULE_REGISTRY_ABI, MODULE_REGISTRY_ADDRESS
from .pi_license_template import PI_LICENSE_TEMPLATE_ABI, PI_LICENSE_TEMPLATE_ADDRESS
from .royalty_module import ROYALTY_MODULE_ABI, ROYALTY_MODULE_ADDRESS
from .royalty_policy_lap import ROYALTY_POLICY_LAP_ABI, ROYALTY_POLICY_LAP_ADDRESS
from .spg import SPG_ABI, SPG_ADDRESS
from .spgnft_beacon import SPGNFT_BEACON_ABI, SPGNFT_BEACON_ADDRESS
from .spgnft_impl import SPGNFT_IMPL_ABI, SPGNFT_IMPL_ADDRESS
