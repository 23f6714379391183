#!/usr/bin/env python3
"""
Base Cloud API abstraction.
Defines the interface the provisioning pipeline talks to, so the pipeline can
run against a fake provider in tests.
"""

import logging
import subprocess
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from azdocker.cloud.types import (
    DEPLOYMENT_POLL_INTERVAL,
    TERMINAL_STATES,
    DeploymentResult,
)

logger = logging.getLogger(__name__)


class CloudApi(ABC):
    """Abstract base class for cloud provider APIs."""

    @staticmethod
    def run_command(
        cmd: list[str],
        show_logs: bool = False,
    ) -> subprocess.CompletedProcess:
        """Execute a CLI command, raising CalledProcessError on failure."""
        try:
            result = subprocess.run(
                cmd,
                capture_output=not show_logs,
                text=True,
                check=True,
            )
            return result
        except subprocess.CalledProcessError as e:
            logger.info(f"Command failed: {' '.join(cmd)}")
            logger.info(f"Error: {e.stderr}")
            raise

    @abstractmethod
    def check_dependencies(self) -> None:
        """Check if required tools are installed."""
        raise NotImplementedError

    # Session

    @abstractmethod
    def is_logged_in(self) -> bool:
        """Check whether an authenticated session exists."""
        raise NotImplementedError

    @abstractmethod
    def login(self) -> None:
        """Start an interactive login."""
        raise NotImplementedError

    @abstractmethod
    def set_subscription(self, subscription: str) -> None:
        """Switch the active subscription."""
        raise NotImplementedError

    @abstractmethod
    def get_account(self) -> dict[str, Any]:
        """Return the active account/subscription context."""
        raise NotImplementedError

    def ensure_logged_in(self, subscription: str | None = None) -> dict[str, Any]:
        """Ensure an authenticated session and return the active context."""
        if self.is_logged_in():
            logger.debug("Existing session found")
        else:
            logger.warning("Not logged in, starting login...")
            self.login()
            if not self.is_logged_in():
                raise RuntimeError("Login did not produce an active session")

        if subscription:
            logger.info(f"Switching to subscription {subscription}")
            self.set_subscription(subscription)

        account = self.get_account()
        logger.info(
            f"Using subscription {account.get('name', '?')} "
            f"({account.get('id', '?')})"
        )
        return account

    # Resource groups

    @abstractmethod
    def resource_group_exists(self, name: str) -> bool:
        """Check if resource group exists."""
        raise NotImplementedError

    @abstractmethod
    def create_resource_group(self, name: str, location: str) -> None:
        """Create a resource group."""
        raise NotImplementedError

    @abstractmethod
    def delete_resource_group(self, name: str) -> None:
        """Delete a resource group and everything in it."""
        raise NotImplementedError

    def ensure_created_resource_group(self, name: str, location: str) -> bool:
        """Create the resource group if absent.

        Returns True if a group was created.
        """
        if self.resource_group_exists(name):
            logger.info(f"Resource group {name} already exists")
            return False
        self.create_resource_group(name, location)
        return True

    # Template deployments

    @abstractmethod
    def submit_deployment(
        self,
        resource_group: str,
        deployment_name: str,
        template_file: Path,
        parameters_file: Path,
    ) -> DeploymentResult:
        """Submit a template deployment without waiting for it.

        Returns a failed result if the submission itself is rejected.
        """
        raise NotImplementedError

    @abstractmethod
    def get_deployment(
        self, resource_group: str, deployment_name: str
    ) -> DeploymentResult:
        """Fetch the current state of a deployment."""
        raise NotImplementedError

    def wait_for_deployment(
        self,
        resource_group: str,
        deployment_name: str,
        poll_interval: float = DEPLOYMENT_POLL_INTERVAL,
        timeout: float | None = None,
    ) -> DeploymentResult:
        """Poll a deployment until it reaches a terminal state.

        Raises:
            TimeoutError: If timeout is set and elapses first
        """
        waited = 0.0
        last_state = None
        while True:
            result = self.get_deployment(resource_group, deployment_name)
            if result.provisioning_state != last_state:
                logger.info(
                    f"Deployment {deployment_name}: {result.provisioning_state}"
                )
                last_state = result.provisioning_state
            if result.provisioning_state in TERMINAL_STATES:
                return result
            if timeout is not None and waited >= timeout:
                raise TimeoutError(
                    f"Deployment {deployment_name} not finished after "
                    f"{timeout}s (last state: {last_state})"
                )
            self.sleep(poll_interval)
            waited += poll_interval

    def deploy_template(
        self,
        resource_group: str,
        deployment_name: str,
        template_file: Path,
        parameters_file: Path,
        poll_interval: float = DEPLOYMENT_POLL_INTERVAL,
        timeout: float | None = None,
    ) -> DeploymentResult:
        """Submit a deployment and block until it is terminal."""
        submitted = self.submit_deployment(
            resource_group, deployment_name, template_file, parameters_file
        )
        if submitted.provisioning_state in TERMINAL_STATES:
            return submitted
        return self.wait_for_deployment(
            resource_group,
            deployment_name,
            poll_interval=poll_interval,
            timeout=timeout,
        )

    @staticmethod
    def sleep(seconds: float) -> None:
        time.sleep(seconds)
