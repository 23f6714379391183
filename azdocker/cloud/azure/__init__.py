"""
Azure deployment utilities.

This package contains all Azure-specific functionality including:
- defaults: Default constants for Azure deployments
- api: Azure CLI wrapper implementing CloudApi
"""

from azdocker.cloud.azure.defaults import (
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_DEPLOYMENT_NAME,
    DEFAULT_REGION,
    DEFAULT_RESOURCE_GROUP,
    DEFAULT_SSH_KEY_PATH,
    DEFAULT_VM_NAME,
    DEFAULT_VM_SIZE,
)

__all__ = [
    # Default constants
    "DEFAULT_ADMIN_USERNAME",
    "DEFAULT_DEPLOYMENT_NAME",
    "DEFAULT_REGION",
    "DEFAULT_RESOURCE_GROUP",
    "DEFAULT_SSH_KEY_PATH",
    "DEFAULT_VM_NAME",
    "DEFAULT_VM_SIZE",
]
