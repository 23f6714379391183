#!/usr/bin/env python3
"""
Azure API functionality.
Azure CLI wrapper for sessions, resource groups and template deployments.
"""

import json
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any

from azdocker.cloud.cloud_api import CloudApi
from azdocker.cloud.types import DeploymentError, DeploymentResult

logger = logging.getLogger(__name__)


class AzureApi(CloudApi):
    """Azure implementation of CloudApi, backed by the `az` CLI."""

    def __init__(self, show_logs: bool = False):
        self.show_logs = show_logs

    def check_dependencies(self) -> None:
        """Check if required tools are installed."""
        tools = ["az", "ssh-keygen"]
        for tool in tools:
            if shutil.which(tool) is None:
                raise RuntimeError(
                    f"Error: '{tool}' command not found. Please install {tool}."
                )

    def is_logged_in(self) -> bool:
        try:
            self.run_command(["az", "account", "show", "-o", "none"])
            return True
        except subprocess.CalledProcessError:
            return False

    def login(self) -> None:
        logger.info("Running az login...")
        self.run_command(["az", "login", "-o", "none"], show_logs=True)

    def set_subscription(self, subscription: str) -> None:
        cmd = ["az", "account", "set", "--subscription", subscription]
        self.run_command(cmd)

    def get_account(self) -> dict[str, Any]:
        result = self.run_command(["az", "account", "show", "-o", "json"])
        return json.loads(result.stdout)

    def resource_group_exists(self, name: str) -> bool:
        """Check if resource group exists."""
        try:
            cmd = ["az", "group", "show", "--name", name, "-o", "none"]
            self.run_command(cmd)
            return True
        except subprocess.CalledProcessError:
            return False

    def create_resource_group(self, name: str, location: str) -> None:
        """Create a resource group."""
        logger.info(f"Creating resource group: {name} in {location}")
        cmd = [
            "az",
            "group",
            "create",
            "--name",
            name,
            "--location",
            location,
            "-o",
            "none",
        ]
        self.run_command(cmd)

    def delete_resource_group(self, name: str) -> None:
        logger.info(
            f"Deleting resource group {name}. This takes a few minutes..."
        )
        cmd = ["az", "group", "delete", "--name", name, "--yes"]
        self.run_command(cmd, show_logs=self.show_logs)

    def submit_deployment(
        self,
        resource_group: str,
        deployment_name: str,
        template_file: Path,
        parameters_file: Path,
    ) -> DeploymentResult:
        logger.info(
            f"Submitting deployment {deployment_name} "
            f"to resource group {resource_group}"
        )
        cmd = [
            "az",
            "deployment",
            "group",
            "create",
            "--resource-group",
            resource_group,
            "--name",
            deployment_name,
            "--template-file",
            str(template_file),
            "--parameters",
            f"@{parameters_file}",
            "--no-wait",
        ]
        try:
            self.run_command(cmd)
        except subprocess.CalledProcessError as e:
            # Validation errors are reported synchronously, before any
            # deployment object exists to poll.
            return DeploymentResult(
                name=deployment_name,
                provisioning_state="Failed",
                error=DeploymentError.from_cli_stderr(e.stderr or ""),
            )
        return DeploymentResult(
            name=deployment_name, provisioning_state="Accepted"
        )

    def get_deployment(
        self, resource_group: str, deployment_name: str
    ) -> DeploymentResult:
        cmd = [
            "az",
            "deployment",
            "group",
            "show",
            "--resource-group",
            resource_group,
            "--name",
            deployment_name,
            "-o",
            "json",
        ]
        result = self.run_command(cmd)
        return DeploymentResult.from_show_json(json.loads(result.stdout))
