"""Shared data types for template deployments."""

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

# Seconds between deployment state polls
DEPLOYMENT_POLL_INTERVAL = 10

# Terminal provisioning states
SUCCEEDED_STATE = "Succeeded"
TERMINAL_STATES = {"Succeeded", "Failed", "Canceled"}


@dataclass
class DeploymentError:
    """ARM error payload: code, message and nested details."""

    code: str
    message: str
    details: list["DeploymentError"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeploymentError":
        return cls(
            code=data.get("code") or "",
            message=data.get("message") or "",
            details=[cls.from_dict(d) for d in data.get("details") or []],
        )

    @classmethod
    def from_cli_stderr(cls, stderr: str) -> "DeploymentError":
        """Parse the error JSON that `az` prints after "ERROR:".

        Falls back to the raw stderr text when no JSON object is present.
        """
        text = stderr.strip()
        start = text.find("{")
        if start != -1:
            try:
                payload = json.loads(text[start:])
            except json.JSONDecodeError:
                payload = None
            if isinstance(payload, dict):
                if isinstance(payload.get("error"), dict):
                    return cls.from_dict(payload["error"])
                if "code" in payload or "message" in payload:
                    return cls.from_dict(payload)
        return cls(code="CliError", message=text or "az command failed")

    def walk(self, depth: int = 0) -> Iterator[tuple[int, "DeploymentError"]]:
        """Yield (depth, error) for this error and every nested detail."""
        yield depth, self
        for detail in self.details:
            yield from detail.walk(depth + 1)

    def messages(self) -> list[str]:
        return [error.message for _, error in self.walk()]


@dataclass
class DeploymentResult:
    """Terminal (or last observed) state of a resource group deployment."""

    name: str
    provisioning_state: str
    outputs: dict[str, Any] = field(default_factory=dict)
    error: DeploymentError | None = None

    @property
    def succeeded(self) -> bool:
        return self.provisioning_state == SUCCEEDED_STATE

    def output(self, key: str, default: Any = None) -> Any:
        return self.outputs.get(key, default)

    @classmethod
    def from_show_json(cls, data: dict[str, Any]) -> "DeploymentResult":
        """Build from `az deployment group show -o json` output.

        ARM wraps each output as {"type": ..., "value": ...}; only the
        values are kept.
        """
        properties = data.get("properties") or {}
        raw_outputs = properties.get("outputs") or {}
        outputs = {
            key: value.get("value") if isinstance(value, dict) else value
            for key, value in raw_outputs.items()
        }
        error = properties.get("error")
        return cls(
            name=data.get("name") or "",
            provisioning_state=properties.get("provisioningState") or "Unknown",
            outputs=outputs,
            error=DeploymentError.from_dict(error) if error else None,
        )
