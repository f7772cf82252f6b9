"""Tests for the error taxonomy."""

from __future__ import annotations

from pathlib import Path

from .errors import (
    ConfigurationError,
    ErrorCode,
    QuantProError,
    ScaffoldError,
    SourceMalformedError,
    SourceUnavailableError,
)


def test_base_error_message_and_dict() -> None:
    error = QuantProError(ErrorCode.INTERNAL_ERROR, "boom", {"k": 1})
    assert str(error) == "[INTERNAL_ERROR] boom"
    assert error.to_dict() == {"code": "INTERNAL_ERROR", "message": "boom", "details": {"k": 1}}


def test_base_error_details_default() -> None:
    assert QuantProError(ErrorCode.VALIDATION_ERROR, "bad").details == {}


def test_configuration_error() -> None:
    error = ConfigurationError("nonexistent", known=["strategy", "risk"])
    assert isinstance(error, QuantProError)
    assert error.code == ErrorCode.CONFIG_UNKNOWN_DOMAIN
    assert "unknown domain: nonexistent" in str(error)
    assert error.details == {"domain": "nonexistent", "known_domains": ["strategy", "risk"]}


def test_source_unavailable_error() -> None:
    error = SourceUnavailableError(Path("data/x.csv"), "No such file or directory")
    assert error.code == ErrorCode.SOURCE_UNAVAILABLE
    assert error.path == Path("data/x.csv")
    assert "No such file or directory" in error.message


def test_source_malformed_error() -> None:
    error = SourceMalformedError("data/x.csv", "header only", rows=1)
    assert error.code == ErrorCode.SOURCE_MALFORMED
    assert error.details["rows"] == 1


def test_scaffold_error() -> None:
    assert ScaffoldError("nope").code == ErrorCode.SCAFFOLD_FAILED
