"""Registry of repository inspectors keyed by provider name."""

from pathlib import Path

import structlog

from scm_metadata.core.exceptions import (
    InspectionError,
    ProviderMismatchError,
    ScmMetadataError,
    UnsupportedProviderError,
)
from scm_metadata.core.models.metadata import RemoteMetadata
from scm_metadata.inspectors.base import RepositoryInspector

logger = structlog.get_logger(__name__)


class InspectorRegistry:
    """Maps provider names to inspectors, in registration order.

    Provider names are matched case-insensitively.
    """

    def __init__(self) -> None:
        self._inspectors: dict[str, RepositoryInspector] = {}

    def register(self, inspector: RepositoryInspector) -> None:
        key = inspector.provider.lower()
        if key in self._inspectors:
            raise ValueError(f"Inspector already registered for provider: {inspector.provider}")
        self._inspectors[key] = inspector

    def get(self, provider: str) -> RepositoryInspector | None:
        return self._inspectors.get(provider.lower())

    @property
    def providers(self) -> list[str]:
        return list(self._inspectors)

    def resolve(
        self,
        directory: str | Path,
        provider: str | None = None,
        remote_url: str | None = None,
    ) -> RemoteMetadata:
        """Inspect ``directory`` with the inspector for ``provider``.

        With no provider, every inspector is tried in registration order
        and the first applicable result is returned.

        Raises:
            UnsupportedProviderError: If no inspector handles the provider.
            ProviderMismatchError: If the provider's inspector does not
                apply to ``directory``.
            InspectionError: If an inspector fails unexpectedly.
        """
        if provider is None:
            for inspector in self._inspectors.values():
                metadata = self._inspect(inspector, directory, remote_url)
                if metadata is not None:
                    return metadata
            raise UnsupportedProviderError("Unable to automatically determine SCM in use")

        inspector = self.get(provider)
        if inspector is None:
            raise UnsupportedProviderError(f'Unsupported SCM "{provider}"', provider=provider)

        metadata = self._inspect(inspector, directory, remote_url)
        if metadata is None:
            raise ProviderMismatchError(
                f'Project does not appear to use SCM "{provider}"',
                provider=provider,
                directory=str(directory),
            )
        return metadata

    @staticmethod
    def _inspect(
        inspector: RepositoryInspector,
        directory: str | Path,
        remote_url: str | None,
    ) -> RemoteMetadata | None:
        logger.debug("Inspecting directory", provider=inspector.provider, directory=str(directory))
        try:
            return inspector.inspect(directory, remote_url)
        except ScmMetadataError:
            raise
        except Exception as e:
            raise InspectionError(
                f'Unexpected failure inspecting SCM "{inspector.provider}"',
                context={"directory": str(directory)},
                cause=e,
            ) from e


def default_registry() -> InspectorRegistry:
    """Create a registry holding the built-in inspectors."""
    from scm_metadata.inspectors.git import GitRepositoryInspector

    registry = InspectorRegistry()
    registry.register(GitRepositoryInspector())
    return registry
