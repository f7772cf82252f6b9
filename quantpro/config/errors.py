"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from quantpro.config.errors import ConfigurationError

    raise ConfigurationError("nonexistent", known=["strategy", "risk"])
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error output."""

    # Configuration errors
    CONFIG_UNKNOWN_DOMAIN = "CONFIG_UNKNOWN_DOMAIN"

    # Record store errors
    SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"
    SOURCE_MALFORMED = "SOURCE_MALFORMED"

    # Project initialization errors
    SCAFFOLD_FAILED = "SCAFFOLD_FAILED"

    # General errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class QuantProError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(QuantProError):
    """Explicit domain name that the catalog does not know."""

    def __init__(self, domain: str, known: Iterable[str] = ()) -> None:
        known = list(known)
        super().__init__(
            ErrorCode.CONFIG_UNKNOWN_DOMAIN,
            f"unknown domain: {domain}",
            {"domain": domain, "known_domains": known},
        )
        self.domain = domain


class SourceUnavailableError(QuantProError):
    """Record store file is missing or unreadable."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        message = f"dataset unreadable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            ErrorCode.SOURCE_UNAVAILABLE,
            message,
            {"path": str(path), "reason": reason},
        )
        self.path = Path(path)


class SourceMalformedError(QuantProError):
    """Record store file is structurally invalid."""

    def __init__(self, path: str | Path, reason: str, rows: int | None = None) -> None:
        super().__init__(
            ErrorCode.SOURCE_MALFORMED,
            f"dataset malformed: {path} ({reason})",
            {"path": str(path), "reason": reason, "rows": rows},
        )
        self.path = Path(path)


class ScaffoldError(QuantProError):
    """Project initialization errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.SCAFFOLD_FAILED, message, details)
