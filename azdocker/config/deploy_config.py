"""Deployment configuration dataclass."""

import argparse
from dataclasses import dataclass
from typing import Any

from azdocker.config.auth_config import AuthConfigs
from azdocker.config.vm_config import VmConfigs


@dataclass
class DeployConfigs:
    vm: VmConfigs
    auth: AuthConfigs
    # Literal address/CIDR, or the "auto" sentinel until resolved
    source_ip: str
    deployment_name: str
    subscription: str | None = None
    dry_run: bool = False
    show_logs: bool = False

    @staticmethod
    def from_args(args: argparse.Namespace) -> "DeployConfigs":
        return DeployConfigs(
            vm=VmConfigs.from_args(args),
            auth=AuthConfigs.from_args(args),
            source_ip=args.source_ip,
            deployment_name=args.deployment_name,
            subscription=args.subscription,
            dry_run=args.dry_run,
            show_logs=args.logs,
        )

    def to_dict(self) -> dict[str, Any]:
        kwargs = {}
        if self.subscription:
            kwargs["subscription"] = self.subscription
        return {
            "vm": self.vm.to_dict(),
            "auth": self.auth.to_dict(),
            "sourceIp": self.source_ip,
            "deploymentName": self.deployment_name,
            **kwargs,
            "dryRun": self.dry_run,
            "showLogs": self.show_logs,
        }
