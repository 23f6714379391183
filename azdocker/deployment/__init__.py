"""Deployment module for the provisioning pipeline."""

from azdocker.deployment.deploy import (
    Deployer,
    DeployOutput,
    delete_group,
)
from azdocker.deployment.report import format_failure, format_success

__all__ = [
    "DeployOutput",
    "Deployer",
    "delete_group",
    "format_failure",
    "format_success",
]
