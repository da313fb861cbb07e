"""Metadata service: from configuration to finished properties."""

from collections.abc import Mapping

import structlog

from scm_metadata.config.settings import Settings
from scm_metadata.core.models.connection import ConnectionUrl
from scm_metadata.core.models.metadata import RemoteMetadata
from scm_metadata.core.exceptions import UnsupportedProviderError
from scm_metadata.core.models.notation import parse_notations
from scm_metadata.inspectors.registry import InspectorRegistry, default_registry
from scm_metadata.properties.builder import build_properties
from scm_metadata.properties.naming import PropertyNameCalculator
from scm_metadata.scm.connection import parse_connection_url
from scm_metadata.scm.segments import remote_path_segments

logger = structlog.get_logger(__name__)


def with_connection_segments(metadata: RemoteMetadata, connection: ConnectionUrl) -> RemoteMetadata:
    """Fill in the remote path segments from the connection string.

    Segments reported by the inspector take precedence.
    """
    if metadata.remote_path_segments:
        return metadata
    segments = tuple(remote_path_segments(connection.specific_part))
    return metadata.model_copy(update={"remote_path_segments": segments})


def compute_properties(
    connection_string: str,
    short_revision_length: int,
    notation_csv: str | None,
    prefix: str | None,
    rename: Mapping[str, str] | None,
    metadata: RemoteMetadata | None,
) -> dict[str, str]:
    """Compute the property mapping for an inspector result.

    ``metadata`` is None when no inspector applied to the checkout.

    Raises:
        MalformedConnectionStringError: If the connection string is invalid.
        InvalidNotationError: If the notation list has an unknown token.
        UnsupportedProviderError: If ``metadata`` is None.
    """
    connection = parse_connection_url(connection_string)
    notations = parse_notations(notation_csv)

    if metadata is None:
        raise UnsupportedProviderError(
            f'Unsupported SCM "{connection.provider}"',
            provider=connection.provider,
        )

    return build_properties(
        with_connection_segments(metadata, connection),
        short_revision_length,
        notations,
        PropertyNameCalculator(prefix, rename),
    )


class MetadataService:
    """Inspects the configured directory and computes its properties."""

    def __init__(self, settings: Settings, registry: InspectorRegistry | None = None) -> None:
        self._settings = settings
        self._registry = registry or default_registry()

    def execute(self) -> dict[str, str]:
        """Return the computed properties, or an empty mapping when disabled."""
        settings = self._settings

        if settings.is_disabled:
            logger.debug(
                "Not adding SCM information",
                skip=settings.skip,
                scm_type=settings.scm_type,
            )
            return {}

        # Validate configuration before touching the repository
        notations = parse_notations(settings.notation)
        connection = self._parse_connection()

        metadata = self._registry.resolve(
            settings.directory,
            provider=self._resolve_provider(connection),
            remote_url=connection.specific_part if connection else None,
        )
        if connection is not None:
            metadata = with_connection_segments(metadata, connection)

        return build_properties(
            metadata,
            settings.short_revision_length,
            notations,
            PropertyNameCalculator(settings.prefix, settings.rename),
        )

    def _parse_connection(self) -> ConnectionUrl | None:
        if self._settings.connection is None:
            return None
        return parse_connection_url(self._settings.connection)

    def _resolve_provider(self, connection: ConnectionUrl | None) -> str | None:
        if not self._settings.is_auto:
            return self._settings.scm_type
        if connection is not None:
            return connection.provider
        return None
