"""Admin login configuration dataclass."""

import argparse
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

PASSWORD_ENV_VAR = "AZDOCKER_ADMIN_PASSWORD"


class AuthMode(str, Enum):
    """How the admin user logs in to the VM."""

    SSH_KEY = "ssh"
    PASSWORD = "password"


@dataclass
class AuthConfigs:
    admin_username: str
    mode: AuthMode
    ssh_key_path: Path
    admin_password: str | None = None

    @staticmethod
    def from_args(args: argparse.Namespace) -> "AuthConfigs":
        mode = AuthMode(args.auth)
        password = None
        if mode == AuthMode.PASSWORD:
            # Never taken from a flag, so it stays out of shell history
            password = os.environ.get(PASSWORD_ENV_VAR) or None
        return AuthConfigs(
            admin_username=args.admin_username,
            mode=mode,
            ssh_key_path=Path(args.ssh_key_path).expanduser(),
            admin_password=password,
        )

    def to_dict(self):
        kwargs = {}
        if self.mode == AuthMode.SSH_KEY:
            kwargs["sshKeyPath"] = str(self.ssh_key_path)
        return {
            "adminUsername": self.admin_username,
            "auth": self.mode.value,
            **kwargs,
        }
