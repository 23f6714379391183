#!/usr/bin/env python3
"""
Argument parser for the azdocker CLI.
"""

import argparse

from azdocker.cloud.azure.defaults import (
    AUTO_SOURCE_IP,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_DEPLOYMENT_NAME,
    DEFAULT_REGION,
    DEFAULT_RESOURCE_GROUP,
    DEFAULT_SSH_KEY_PATH,
    DEFAULT_VM_NAME,
    DEFAULT_VM_SIZE,
    VALID_REGIONS,
)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Provision an Azure VM running Docker and print the commands "
            "to use it as a remote docker context"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Placement
    parser.add_argument(
        "-l",
        "--location",
        "-r",
        "--region",
        type=str,
        default=DEFAULT_REGION,
        dest="location",
        help=(
            f"Azure region (default: {DEFAULT_REGION}; "
            f"valid: {', '.join(sorted(VALID_REGIONS))})"
        ),
    )
    parser.add_argument(
        "-g",
        "--resource-group",
        type=str,
        default=DEFAULT_RESOURCE_GROUP,
        help=f"Resource group to deploy into (default: {DEFAULT_RESOURCE_GROUP})",
    )
    parser.add_argument(
        "--subscription",
        type=str,
        default=None,
        help="Subscription name or id to switch to before deploying",
    )

    # VM
    parser.add_argument(
        "--vm-name",
        type=str,
        default=DEFAULT_VM_NAME,
        help=f"VM name (default: {DEFAULT_VM_NAME})",
    )
    parser.add_argument(
        "--vm-size",
        type=str,
        default=DEFAULT_VM_SIZE,
        help=f"VM size (default: {DEFAULT_VM_SIZE})",
    )

    # Login
    parser.add_argument(
        "--admin-username",
        type=str,
        default=DEFAULT_ADMIN_USERNAME,
        help=f"Admin user on the VM (default: {DEFAULT_ADMIN_USERNAME})",
    )
    parser.add_argument(
        "--auth",
        type=str,
        choices=["ssh", "password"],
        default="ssh",
        help=(
            "Admin login method (default: ssh). For password, set "
            "AZDOCKER_ADMIN_PASSWORD or enter it when prompted"
        ),
    )
    parser.add_argument(
        "--ssh-key-path",
        type=str,
        default=DEFAULT_SSH_KEY_PATH,
        help=(
            "Private key path; generated with ssh-keygen if missing "
            f"(default: {DEFAULT_SSH_KEY_PATH})"
        ),
    )

    # Network configuration
    parser.add_argument(
        "--source-ip",
        type=str,
        default=AUTO_SOURCE_IP,
        help=(
            "Source IP address or CIDR allowed to SSH in. "
            f"'{AUTO_SOURCE_IP}' (default) detects this machine's public IP"
        ),
    )
    for resource in ["vnet", "subnet", "public-ip", "nsg", "nic"]:
        suffix = "ip" if resource == "public-ip" else resource
        parser.add_argument(
            f"--{resource}-name",
            type=str,
            default=None,
            help=f"Name override (default: <vm-name>-{suffix})",
        )

    # Deployment
    parser.add_argument(
        "--deployment-name",
        type=str,
        default=DEFAULT_DEPLOYMENT_NAME,
        help=f"ARM deployment name (default: {DEFAULT_DEPLOYMENT_NAME})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Resolve inputs and print the deployment parameters, then stop",
    )
    parser.add_argument(
        "--delete-group",
        type=str,
        default=None,
        metavar="RESOURCE_GROUP",
        help="Delete the given resource group (after confirmation) and exit",
    )

    # Logging
    parser.add_argument(
        "-v",
        "--logs",
        action="store_true",
        help="If flagged, print debug logs and az output as they run",
        default=False,
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)
