"""Utility functions for configuration."""

import logging
import re

import requests

from azdocker.cloud.azure.defaults import AUTO_SOURCE_IP, IP_ECHO_URL
from azdocker.prompts import Prompter

logger = logging.getLogger(__name__)

_SOURCE_IP_PATTERN = re.compile(
    r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})(?:/([0-9]{1,2}))?$"
)


def is_valid_source_ip(value: str) -> bool:
    """Check for a dotted-quad IPv4 address, optionally with a /prefix."""
    match = _SOURCE_IP_PATTERN.match(value.strip())
    if not match:
        return False
    *octets, prefix = match.groups()
    if any(int(octet) > 255 for octet in octets):
        return False
    return prefix is None or int(prefix) <= 32


def get_host_ip(url: str = IP_ECHO_URL, timeout: float = 10) -> str:
    """Get the host's public IP address from a plain-text echo service."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise RuntimeError(f"Failed to fetch host IP from {url}: {e}") from e
    return response.text.strip()


def prompt_source_ip(prompter: Prompter) -> str:
    """Ask the operator until they enter a valid address or CIDR block."""
    while True:
        value = prompter.ask(
            "Enter the public IP address or CIDR allowed to SSH in "
            "(e.g. 203.0.113.7 or 203.0.113.0/24): "
        ).strip()
        if is_valid_source_ip(value):
            return value
        logger.warning(f"'{value}' is not a valid IPv4 address or CIDR block")


def resolve_source_ip(value: str, prompter: Prompter) -> str:
    """Resolve the firewall source for the SSH rule.

    An explicit value is validated and returned as is. The auto sentinel
    queries the echo service and falls back to asking the operator when the
    lookup fails or returns something that is not an address.
    """
    if value.strip().lower() != AUTO_SOURCE_IP:
        value = value.strip()
        if not is_valid_source_ip(value):
            raise ValueError(
                f"Invalid --source-ip '{value}': expected an IPv4 address "
                "or CIDR block"
            )
        return value

    logger.info(
        f"No --source-ip provided, so fetching IP from {IP_ECHO_URL}..."
    )
    try:
        detected = get_host_ip()
    except RuntimeError as e:
        logger.warning(f"Could not detect public IP: {e}")
        return prompt_source_ip(prompter)

    if not is_valid_source_ip(detected):
        logger.warning(
            f"IP echo service returned an unexpected response: {detected!r}"
        )
        return prompt_source_ip(prompter)

    logger.info(f"Fetched public IP: {detected}")
    return detected
