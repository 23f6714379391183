"""Configuration dataclasses for azdocker deployments."""

from azdocker.config.auth_config import PASSWORD_ENV_VAR, AuthConfigs, AuthMode
from azdocker.config.configs import Configs
from azdocker.config.deploy_config import DeployConfigs
from azdocker.config.mode import Mode
from azdocker.config.utils import (
    AUTO_SOURCE_IP,
    get_host_ip,
    is_valid_source_ip,
    resolve_source_ip,
)
from azdocker.config.vm_config import VmConfigs

__all__ = [
    # Config classes
    "AuthConfigs",
    "AuthMode",
    "Configs",
    "DeployConfigs",
    "Mode",
    "VmConfigs",
    "PASSWORD_ENV_VAR",
    # Source IP
    "AUTO_SOURCE_IP",
    "get_host_ip",
    "is_valid_source_ip",
    "resolve_source_ip",
]
