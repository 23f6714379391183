"""Top-level Configs dataclass."""

from dataclasses import dataclass
from typing import Any

from azdocker.config.deploy_config import DeployConfigs
from azdocker.config.mode import Mode
from azdocker.utils.parser import parse_args


@dataclass
class Configs:
    mode: Mode
    deploy: DeployConfigs | None
    show_logs: bool

    @staticmethod
    def parse(argv: list[str] | None = None) -> "Configs":
        args = parse_args(argv)
        mode = Mode.from_args(args)
        deploy = DeployConfigs.from_args(args) if mode.deploy else None
        return Configs(mode=mode, deploy=deploy, show_logs=args.logs)

    def to_dict(self) -> dict[str, Any]:
        kwargs = {}
        if self.deploy:
            kwargs["deploy"] = self.deploy.to_dict()
        return {
            "mode": self.mode.to_dict(),
            **kwargs,
            "show_logs": self.show_logs,
        }
