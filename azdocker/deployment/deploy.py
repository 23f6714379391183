import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from azdocker.auth import (
    Credentials,
    KeyGenerator,
    generate_key_pair,
    prepare_credentials,
)
from azdocker.cloud.cloud_api import CloudApi
from azdocker.cloud.types import DeploymentResult
from azdocker.config import DeployConfigs, resolve_source_ip
from azdocker.deployment.report import format_failure, format_success
from azdocker.prompts import Prompter
from azdocker.template import (
    build_parameters,
    validate_admin_username,
    write_parameters_file,
    write_template_file,
)

logger = logging.getLogger(__name__)


def delete_group(
    cloud_api: CloudApi,
    name: str,
    prompter: Prompter,
    subscription: str | None = None,
) -> bool:
    """
    Delete a resource group after confirmation.
    Returns True if deleted, False if it did not exist.
    """
    where = subscription or "(active)"
    if not cloud_api.resource_group_exists(name):
        logger.error(f"Resource group {name} not found in subscription {where}")
        return False
    prompter.confirm(
        f"delete resource group {name} in subscription {where} "
        "and everything in it"
    )
    cloud_api.delete_resource_group(name)
    logger.info(f"Deleted resource group {name}")
    return True


@dataclass
class DeployOutput:
    configs: DeployConfigs
    credentials: Credentials
    result: DeploymentResult

    @property
    def succeeded(self) -> bool:
        return self.result.succeeded

    def report(self) -> str:
        if self.succeeded:
            return format_success(self.result, self.credentials)
        return format_failure(self.result)


class Deployer:
    def __init__(
        self,
        configs: DeployConfigs,
        cloud_api: CloudApi,
        prompter: Prompter,
        keygen: KeyGenerator | None = None,
    ):
        self.configs = configs
        self.cloud_api = cloud_api
        self.prompter = prompter
        self.keygen = keygen or generate_key_pair
        self.tmp_files: list[Path] = []

    def resolve_configs(self) -> DeployConfigs:
        """Return configs with the source IP resolved to a literal value."""
        source_ip = resolve_source_ip(self.configs.source_ip, self.prompter)
        return replace(self.configs, source_ip=source_ip)

    def deploy(self) -> DeployOutput | None:
        """Run the pipeline. Returns None for a dry run."""
        validate_admin_username(self.configs.auth.admin_username)

        self.cloud_api.ensure_logged_in(self.configs.subscription)
        configs = self.resolve_configs()
        credentials = prepare_credentials(configs.auth, self.prompter, self.keygen)
        parameters = build_parameters(configs, credentials)

        vm = configs.vm
        if configs.dry_run:
            shown = dict(parameters)
            if "adminPassword" in shown:
                shown["adminPassword"] = "***"
            logger.info(
                f"[dry-run] resource group {vm.resource_group} ({vm.location}), "
                f"deployment {configs.deployment_name}"
            )
            logger.info(f"[dry-run] parameters:\n{json.dumps(shown, indent=2)}")
            return None

        self.cloud_api.ensure_created_resource_group(vm.resource_group, vm.location)

        template_file = write_template_file(
            configs.auth.admin_username, credentials.uses_ssh_key
        )
        self.tmp_files.append(template_file)
        parameters_file = write_parameters_file(parameters)
        self.tmp_files.append(parameters_file)

        logger.info(
            f"Deploying {vm.name} ({vm.size}) to {vm.resource_group}. "
            "This takes a few minutes..."
        )
        result = self.cloud_api.deploy_template(
            resource_group=vm.resource_group,
            deployment_name=configs.deployment_name,
            template_file=template_file,
            parameters_file=parameters_file,
        )
        return DeployOutput(configs=configs, credentials=credentials, result=result)

    def cleanup(self) -> None:
        """Remove temporary template and parameter files."""
        while self.tmp_files:
            path = self.tmp_files.pop()
            if path.exists():
                os.remove(path)
                logger.debug(f"Deleted temporary file: {path}")
