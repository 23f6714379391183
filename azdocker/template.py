"""ARM template, bootstrap script and parameter rendering.

The template and the bootstrap script ship as package data under
azdocker/templates. Each run renders the script for its admin user, embeds
it base64-encoded in the template, and writes template and parameters to
temporary files for `az deployment group create`.
"""

import base64
import json
import logging
import os
import re
import tempfile
from importlib import resources
from pathlib import Path
from string import Template
from typing import Any

from azdocker.auth import Credentials
from azdocker.config import DeployConfigs

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "azuredeploy.json"
BOOTSTRAP_SCRIPT_NAME = "install_docker.sh"
BOOTSTRAP_SCRIPT_VERSION = "1"

PARAMETERS_SCHEMA = (
    "https://schema.management.azure.com/schemas/2019-04-01/"
    "deploymentParameters.json#"
)

_USERNAME_PATTERN = re.compile(r"^[a-z_][a-z0-9_-]{0,31}$")

# Names Azure refuses for the admin account of a Linux VM
RESERVED_USERNAMES = {
    "1",
    "123",
    "a",
    "actuser",
    "adm",
    "admin",
    "admin1",
    "admin2",
    "administrator",
    "aspnet",
    "backup",
    "console",
    "david",
    "guest",
    "john",
    "owner",
    "root",
    "server",
    "sql",
    "support",
    "support_388945a0",
    "sys",
    "test",
    "test1",
    "test2",
    "test3",
    "user",
    "user1",
    "user2",
    "user3",
    "user4",
    "user5",
}


def _read_resource(name: str) -> str:
    return resources.files("azdocker.templates").joinpath(name).read_text()


def validate_admin_username(username: str) -> None:
    """Validate an admin username before it is embedded in a shell script.

    Raises:
        ValueError: If the name is not a plain Linux user name or is
            reserved by Azure
    """
    if not _USERNAME_PATTERN.match(username):
        raise ValueError(
            f"Invalid admin username '{username}': use lowercase letters, "
            "digits, '_' or '-', starting with a letter or '_' "
            "(max 32 characters)"
        )
    if username in RESERVED_USERNAMES:
        raise ValueError(f"Admin username '{username}' is reserved by Azure")


def render_bootstrap_script(admin_username: str, ssh_key_configured: bool) -> str:
    """Fill the bootstrap script's named slots."""
    validate_admin_username(admin_username)
    script = Template(_read_resource(BOOTSTRAP_SCRIPT_NAME))
    return script.substitute(
        script_version=BOOTSTRAP_SCRIPT_VERSION,
        admin_username=admin_username,
        ssh_key_configured="true" if ssh_key_configured else "false",
    )


def load_template() -> dict[str, Any]:
    return json.loads(_read_resource(TEMPLATE_NAME))


def build_template(admin_username: str, ssh_key_configured: bool) -> dict[str, Any]:
    """Return the ARM template with the rendered bootstrap script embedded."""
    script = render_bootstrap_script(admin_username, ssh_key_configured)
    template = load_template()
    template["variables"]["bootstrapScript"] = base64.b64encode(
        script.encode()
    ).decode()
    return template


def build_parameters(
    config: DeployConfigs, credentials: Credentials
) -> dict[str, Any]:
    """Assemble the template parameter set.

    Only the login material that is in use is included; the other
    parameter is left to the template default.
    """
    vm = config.vm
    parameters = {
        "location": vm.location,
        "vmName": vm.name,
        "vmSize": vm.size,
        "adminUsername": config.auth.admin_username,
        "sourceMyIpAddress": config.source_ip,
        "vnetName": vm.vnet_name,
        "subnetName": vm.subnet_name,
        "publicIpName": vm.public_ip_name,
        "nsgName": vm.nsg_name,
        "nicName": vm.nic_name,
    }
    if credentials.uses_ssh_key:
        parameters["adminSshPublicKey"] = credentials.ssh_public_key
    else:
        parameters["adminPassword"] = credentials.admin_password
    return parameters


def _write_json_tmpfile(data: dict[str, Any], prefix: str) -> Path:
    fd, temp_file = tempfile.mkstemp(prefix=prefix, suffix=".json")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=2)
    except BaseException:
        os.unlink(temp_file)
        raise
    return Path(temp_file)


def write_template_file(admin_username: str, ssh_key_configured: bool) -> Path:
    template = build_template(admin_username, ssh_key_configured)
    path = _write_json_tmpfile(template, "azdocker-template-")
    logger.debug(f"Wrote template to {path}")
    return path


def write_parameters_file(parameters: dict[str, Any]) -> Path:
    """Write an ARM parameters document (mode 0600, as it may hold a password)."""
    document = {
        "$schema": PARAMETERS_SCHEMA,
        "contentVersion": "1.0.0.0",
        "parameters": {k: {"value": v} for k, v in parameters.items()},
    }
    path = _write_json_tmpfile(document, "azdocker-parameters-")
    logger.debug(f"Wrote parameters to {path}")
    return path
