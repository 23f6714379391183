"""Unit tests for the success and failure reports."""

from pathlib import Path

from azdocker.auth import Credentials
from azdocker.cloud.types import DeploymentError, DeploymentResult
from azdocker.config import AuthMode
from azdocker.deployment.report import format_failure, format_success

from conftest import succeeded_result

KEY_PATH = Path("/home/me/.ssh/azdocker_id_rsa")


def _key_creds():
    return Credentials(mode=AuthMode.SSH_KEY, ssh_public_key="ssh-rsa AAAA", ssh_key_path=KEY_PATH)


def _password_creds():
    return Credentials(mode=AuthMode.PASSWORD, admin_password="Str0ng!Passw0rd")


def test_success_echoes_outputs_verbatim():
    result = succeeded_result(
        vmName="dockerbox",
        adminUsername="ops",
        publicIpAddress="52.170.9.44",
        fqdn="dockerbox-x1y2.eastus.cloudapp.azure.com",
    )
    text = format_success(result, _key_creds())

    assert "52.170.9.44" in text
    assert "dockerbox-x1y2.eastus.cloudapp.azure.com" in text
    assert "Admin user: ops" in text
    assert 'docker context create dockerbox --docker "host=ssh://ops@dockerbox-x1y2.eastus.cloudapp.azure.com"' in text
    assert "docker context use dockerbox" in text


def test_key_mode_points_at_key_path():
    text = format_success(succeeded_result(), _key_creds())
    assert f"ssh-add {KEY_PATH}" in text
    assert f"ssh -i {KEY_PATH} azureuser@" in text
    assert "ssh-copy-id" not in text


def test_password_mode_reminds_about_keys():
    text = format_success(succeeded_result(), _password_creds())
    assert "Password login is enabled for azureuser" in text
    assert "ssh-copy-id azureuser@docker-host-abc123.eastus.cloudapp.azure.com" in text
    assert "ssh-add" not in text
    assert "Str0ng!Passw0rd" not in text


def test_falls_back_to_ip_without_fqdn():
    text = format_success(succeeded_result(fqdn=None), _key_creds())
    assert "host=ssh://azureuser@20.1.2.3" in text


def test_failure_lists_every_nested_message():
    error = DeploymentError(
        code="DeploymentFailed",
        message="At least one resource deployment operation failed.",
        details=[
            DeploymentError(
                code="VMExtensionProvisioningError",
                message="VM has reported a failure when processing extension 'install-docker'.",
                details=[DeploymentError(code="", message="E: Unable to locate package docker-ce")],
            ),
            DeploymentError(code="Conflict", message="Public IP in use"),
        ],
    )
    result = DeploymentResult(name="azdocker-deployment", provisioning_state="Failed", error=error)
    text = format_failure(result)

    assert text.splitlines()[0] == "Deployment azdocker-deployment Failed"
    for message in error.messages():
        assert message in text
    assert "  DeploymentFailed: At least one" in text
    assert "      E: Unable to locate package docker-ce" in text


def test_failure_without_detail():
    text = format_failure(DeploymentResult(name="d", provisioning_state="Canceled"))
    assert "Deployment d Canceled" in text
    assert "No error detail" in text
