"""Exception hierarchy for the domain layer.

Domain code raises these; the service layer translates them into
``ServiceError`` payloads using :attr:`FinPatternsError.code` and
:meth:`FinPatternsError.detail`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class FinPatternsError(Exception):
    """Base class for all finpatterns domain errors."""

    code: str = "ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for error payloads."""
        return {}


class NotFoundError(FinPatternsError):
    """Raised when a registry lookup misses."""

    code = "NOT_FOUND"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No prototype found for plan: {name}")

    def detail(self) -> dict[str, Any]:
        return {"name": self.name}


class UnknownVariantError(FinPatternsError):
    """Raised when a discriminator does not select any known variant."""

    code = "UNKNOWN_VARIANT"

    def __init__(self, family: str, discriminator: str, choices: Iterable[str] = ()) -> None:
        self.family = family
        self.discriminator = discriminator
        self.choices = sorted(str(choice) for choice in choices)
        msg = f"Unknown {family}: {discriminator!r}"
        if self.choices:
            msg += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(msg)

    def detail(self) -> dict[str, Any]:
        return {
            "family": self.family,
            "discriminator": self.discriminator,
            "choices": self.choices,
        }


class InvalidConfigurationError(FinPatternsError):
    """Raised when a builder is used before its prerequisites are set."""

    code = "INVALID_CONFIGURATION"

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        self.fields = list(fields)
        super().__init__(message)

    def detail(self) -> dict[str, Any]:
        return {"fields": self.fields}
