"""Cloud provider abstraction and the Azure implementation."""

from azdocker.cloud.cloud_api import CloudApi
from azdocker.cloud.types import DeploymentError, DeploymentResult

# Note: AzureApi is NOT imported here; import it from
# azdocker.cloud.azure.api when needed.

__all__ = [
    "CloudApi",
    "DeploymentError",
    "DeploymentResult",
]
