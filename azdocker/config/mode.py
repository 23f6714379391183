"""Mode configuration dataclass."""

import argparse
from dataclasses import dataclass


@dataclass
class Mode:
    deploy: bool
    delete_group: str | None
    subscription: str | None = None

    @staticmethod
    def from_args(args: argparse.Namespace) -> "Mode":
        delete_group = args.delete_group
        return Mode(
            deploy=delete_group is None,
            delete_group=delete_group,
            subscription=args.subscription,
        )

    def to_dict(self) -> dict[str, str | bool]:
        kwargs = {}
        if self.delete_group:
            kwargs["deleteGroup"] = self.delete_group
            if self.subscription:
                kwargs["subscription"] = self.subscription
        return {"deploy": self.deploy, **kwargs}
