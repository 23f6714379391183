"""Provision an Azure VM running Docker for use as a remote docker context."""

__version__ = "0.1.0"
