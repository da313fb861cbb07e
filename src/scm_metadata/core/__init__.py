"""Core domain models and exceptions for SCM Metadata."""

from scm_metadata.core.exceptions import (
    ConfigurationError,
    InspectionError,
    InvalidNotationError,
    MalformedConnectionStringError,
    ProviderMismatchError,
    ScmMetadataError,
    UnsupportedProviderError,
)
from scm_metadata.core.models import (
    ConnectionUrl,
    PathPropertiesNotation,
    RemoteMetadata,
    parse_notations,
)

__all__ = [
    # Models
    "ConnectionUrl",
    "RemoteMetadata",
    "PathPropertiesNotation",
    "parse_notations",
    # Exceptions
    "ScmMetadataError",
    "ConfigurationError",
    "MalformedConnectionStringError",
    "InvalidNotationError",
    "UnsupportedProviderError",
    "ProviderMismatchError",
    "InspectionError",
]
