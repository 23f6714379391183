"""Admin login material: SSH key pairs and passwords."""

import logging
import os
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from azdocker.config.auth_config import AuthConfigs, AuthMode
from azdocker.prompts import Prompter
from azdocker.utils.redact import register_secret

logger = logging.getLogger(__name__)

KeyGenerator = Callable[[Path, str], None]

# Azure's rule for Linux admin passwords
MIN_PASSWORD_LENGTH = 12
MAX_PASSWORD_LENGTH = 123


@dataclass
class Credentials:
    """Login material forwarded to the deployment; exactly one kind is set."""

    mode: AuthMode
    ssh_public_key: str | None = None
    ssh_key_path: Path | None = None
    admin_password: str | None = None

    @property
    def uses_ssh_key(self) -> bool:
        return self.mode == AuthMode.SSH_KEY


def _public_key_path(path: Path) -> Path:
    return path.with_name(path.name + ".pub")


def ssh_key_pair_exists(path: Path) -> bool:
    return path.exists() and _public_key_path(path).exists()


def generate_key_pair(path: Path, comment: str) -> None:
    """Generate an RSA key pair with no passphrase at path / path.pub."""
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    logger.info(f"Generating new SSH key pair at {path}")
    try:
        subprocess.run(
            [
                "ssh-keygen",
                "-t",
                "rsa",
                "-b",
                "4096",
                "-N",
                "",
                "-C",
                comment,
                "-f",
                str(path),
            ],
            check=True,
            capture_output=True,
            text=True,
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"Failed to generate SSH keys: {e.stderr}")
        raise
    os.chmod(path, 0o600)


def read_public_key(path: Path) -> str:
    with open(_public_key_path(path)) as f:
        return f.read().strip()


def validate_password(password: str) -> None:
    """Check a password against Azure's Linux VM complexity rule.

    Raises:
        ValueError: If the password is too short/long or too simple
    """
    if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        raise ValueError(
            f"Admin password must be {MIN_PASSWORD_LENGTH}-"
            f"{MAX_PASSWORD_LENGTH} characters long"
        )
    classes = [
        any(c.islower() for c in password),
        any(c.isupper() for c in password),
        any(c.isdigit() for c in password),
        any(not c.isalnum() for c in password),
    ]
    if sum(classes) < 3:
        raise ValueError(
            "Admin password must contain at least three of: lowercase, "
            "uppercase, digit, special character"
        )


def _prompt_password(prompter: Prompter) -> str:
    password = prompter.ask_secret("Admin password: ")
    if prompter.ask_secret("Confirm admin password: ") != password:
        raise ValueError("Passwords do not match")
    return password


def prepare_credentials(
    auth: AuthConfigs,
    prompter: Prompter,
    keygen: KeyGenerator = generate_key_pair,
) -> Credentials:
    """Locate or create the login material for the admin user."""
    if auth.mode == AuthMode.SSH_KEY:
        path = auth.ssh_key_path
        if ssh_key_pair_exists(path):
            logger.info(f"Using existing SSH key: {path}")
        else:
            keygen(path, f"{auth.admin_username}@azdocker")
            if not ssh_key_pair_exists(path):
                raise RuntimeError(f"SSH key pair was not created at {path}")
        return Credentials(
            mode=auth.mode,
            ssh_public_key=read_public_key(path),
            ssh_key_path=path,
        )

    password = auth.admin_password or _prompt_password(prompter)
    validate_password(password)
    register_secret(password)
    return Credentials(mode=auth.mode, admin_password=password)
