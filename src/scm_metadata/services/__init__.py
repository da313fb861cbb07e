"""Service layer for SCM Metadata."""

from scm_metadata.services.metadata import (
    MetadataService,
    compute_properties,
    with_connection_segments,
)

__all__ = ["MetadataService", "compute_properties", "with_connection_segments"]
