"""Domain models for SCM Metadata."""

from scm_metadata.core.models.connection import ConnectionUrl
from scm_metadata.core.models.metadata import RemoteMetadata
from scm_metadata.core.models.notation import PathPropertiesNotation, parse_notations

__all__ = [
    "ConnectionUrl",
    "RemoteMetadata",
    "PathPropertiesNotation",
    "parse_notations",
]
