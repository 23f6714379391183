"""Operator prompts.

Steps that may need to ask the operator something take a Prompter, so tests
can hand in canned answers instead of reading the terminal.
"""

import getpass
from abc import ABC, abstractmethod


class Prompter(ABC):
    @abstractmethod
    def ask(self, message: str) -> str:
        """Ask for a plain value."""
        raise NotImplementedError

    @abstractmethod
    def ask_secret(self, message: str) -> str:
        """Ask for a value without echoing it."""
        raise NotImplementedError

    def confirm(self, what: str) -> bool:
        """Ask user for confirmation.

        Args:
            what: Description of the action

        Returns:
            True if user confirms, raises ValueError otherwise
        """
        inp = self.ask(f"Are you sure you want to {what}? [y/N]\n")
        if not inp.strip().lower() == "y":
            raise ValueError(f"Aborting; will not {what}")
        return True


class ConsolePrompter(Prompter):
    def ask(self, message: str) -> str:
        return input(message)

    def ask_secret(self, message: str) -> str:
        return getpass.getpass(message)
