"""
Configuration - Application settings, error taxonomy, and data discovery.
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    QuantProError,
    ScaffoldError,
    SourceMalformedError,
    SourceUnavailableError,
)
from .settings import Settings, find_data_dir, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "find_data_dir",
    # Errors
    "ErrorCode",
    "QuantProError",
    "ConfigurationError",
    "SourceUnavailableError",
    "SourceMalformedError",
    "ScaffoldError",
]
