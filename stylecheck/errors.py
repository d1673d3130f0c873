"""Error types raised while loading rules and reading input units."""

from __future__ import annotations


class StyleCheckError(Exception):
    """Base class for every error the checker reports."""


class InputNotFound(StyleCheckError):
    """An input path does not exist, cannot be read, or is not text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedRuleDefinition(StyleCheckError):
    """A custom rule file is present but cannot be turned into rules."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class RegistryFrozenError(StyleCheckError):
    """Raised when a frozen rule registry is asked to change."""
