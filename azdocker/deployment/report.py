"""Console reports for finished deployments."""

from azdocker.auth import Credentials
from azdocker.cloud.types import DeploymentResult


def connection_host(result: DeploymentResult) -> str:
    """Prefer the DNS name; fall back to the bare address."""
    return result.output("fqdn") or result.output("publicIpAddress") or ""


def docker_context_commands(context_name: str, user: str, host: str) -> list[str]:
    return [
        f'docker context create {context_name} --docker "host=ssh://{user}@{host}"',
        f"docker context use {context_name}",
        "docker info",
    ]


def format_success(result: DeploymentResult, credentials: Credentials) -> str:
    vm_name = result.output("vmName", "")
    user = result.output("adminUsername", "")
    host = connection_host(result)

    lines = [
        f"Deployment {result.name} {result.provisioning_state}",
        f"  VM:         {vm_name}",
        f"  Admin user: {user}",
        f"  Public IP:  {result.output('publicIpAddress', '')}",
        f"  FQDN:       {result.output('fqdn', '')}",
    ]
    if result.output("sshCommand"):
        lines.append(f"  SSH:        {result.output('sshCommand')}")
    lines.append("")

    if credentials.uses_ssh_key:
        key = credentials.ssh_key_path
        lines += [
            "Log in with the generated key (and load it for docker):",
            f"  ssh-add {key}",
            f"  ssh -i {key} {user}@{host}",
        ]
    else:
        lines += [
            f"Password login is enabled for {user}. The docker SSH transport "
            "cannot answer password prompts, so install a key first:",
            f"  ssh-copy-id {user}@{host}",
        ]
    lines += ["", "Create and use a remote docker context:"]
    lines += [f"  {cmd}" for cmd in docker_context_commands(vm_name, user, host)]
    lines += [
        "",
        "Docker is installed by a first-boot script; if `docker info` fails, "
        "give it a few minutes.",
    ]
    return "\n".join(lines)


def format_failure(result: DeploymentResult) -> str:
    lines = [f"Deployment {result.name} {result.provisioning_state}"]
    if result.error is None:
        lines.append("  No error detail was returned")
        return "\n".join(lines)
    for depth, error in result.error.walk():
        indent = "  " * (depth + 1)
        prefix = f"{error.code}: " if error.code else ""
        lines.append(f"{indent}{prefix}{error.message}")
    return "\n".join(lines)
