"""Utility module for common helper functions.

Import directly from submodules when needed:
  - from azdocker.utils.logging_setup import ...
  - from azdocker.utils.parser import ...
  - from azdocker.utils.redact import ...
"""

__all__ = [
    "logging_setup",
    "parser",
    "redact",
]
