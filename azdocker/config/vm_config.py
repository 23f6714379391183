"""VM configuration dataclass."""

import argparse
from dataclasses import dataclass

from azdocker.cloud.azure.defaults import validate_region


@dataclass
class VmConfigs:
    resource_group: str
    name: str
    size: str
    location: str
    vnet_name: str
    subnet_name: str
    public_ip_name: str
    nsg_name: str
    nic_name: str

    @staticmethod
    def from_args(args: argparse.Namespace) -> "VmConfigs":
        name = args.vm_name
        validate_region(args.location)
        return VmConfigs(
            resource_group=args.resource_group,
            name=name,
            size=args.vm_size,
            location=args.location,
            vnet_name=args.vnet_name or f"{name}-vnet",
            subnet_name=args.subnet_name or f"{name}-subnet",
            public_ip_name=args.public_ip_name or f"{name}-ip",
            nsg_name=args.nsg_name or f"{name}-nsg",
            nic_name=args.nic_name or f"{name}-nic",
        )

    def to_dict(self):
        return {
            "resourceGroup": self.resource_group,
            "name": self.name,
            "size": self.size,
            "location": self.location,
            "vnetName": self.vnet_name,
            "subnetName": self.subnet_name,
            "publicIpName": self.public_ip_name,
            "nsgName": self.nsg_name,
            "nicName": self.nic_name,
        }
