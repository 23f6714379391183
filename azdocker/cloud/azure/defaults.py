"""
Default values for Azure deployments.
"""

# The resource group that owns the VM, IP, NSG, etc.
DEFAULT_RESOURCE_GROUP = "azdocker-rg"

# VM configuration
DEFAULT_REGION = "eastus"
DEFAULT_VM_NAME = "docker-host"
DEFAULT_VM_SIZE = "Standard_B2s"
DEFAULT_ADMIN_USERNAME = "azureuser"
DEFAULT_SSH_KEY_PATH = "~/.ssh/azdocker_id_rsa"

# Sentinel for --source-ip meaning "detect via the IP echo service"
AUTO_SOURCE_IP = "auto"
IP_ECHO_URL = "https://api.ipify.org"

# Deployment submitted to the resource group
DEFAULT_DEPLOYMENT_NAME = "azdocker-deployment"

# Valid Azure regions
VALID_REGIONS = {
    "australiaeast",
    "australiasoutheast",
    "brazilsouth",
    "canadacentral",
    "canadaeast",
    "centralindia",
    "centralus",
    "eastasia",
    "eastus",
    "eastus2",
    "francecentral",
    "germanywestcentral",
    "italynorth",
    "japaneast",
    "japanwest",
    "koreacentral",
    "northcentralus",
    "northeurope",
    "norwayeast",
    "polandcentral",
    "southafricanorth",
    "southcentralus",
    "southeastasia",
    "swedencentral",
    "switzerlandnorth",
    "uaenorth",
    "uksouth",
    "ukwest",
    "westcentralus",
    "westeurope",
    "westus",
    "westus2",
    "westus3",
}


def validate_region(region: str) -> None:
    """Validate that the region is a valid Azure region.

    Args:
        region: The Azure region to validate

    Raises:
        ValueError: If the region is not valid
    """
    if region not in VALID_REGIONS:
        valid_regions = ", ".join(sorted(VALID_REGIONS))
        msg = (
            f"Invalid Azure region: {region}. "
            f"Valid Azure regions are: {valid_regions}"
        )
        raise ValueError(msg)
