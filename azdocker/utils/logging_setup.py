"""CLI logging setup: plain %(message)s output on stdout."""

import logging
import sys

from azdocker.utils.redact import SecretRedactingFilter


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for the CLI.

    Output reads like print(); -v/--logs lowers the level to DEBUG.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.addFilter(SecretRedactingFilter())
    root.addHandler(handler)
