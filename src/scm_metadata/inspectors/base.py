"""Repository inspector interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from scm_metadata.core.models.metadata import RemoteMetadata


class RepositoryInspector(ABC):
    """Reads branch, revision and dirty state from a checkout.

    ``inspect`` returns None when the directory is not managed by this
    inspector's SCM. Raising signals an unexpected failure.
    """

    provider: str

    @abstractmethod
    def inspect(self, directory: str | Path, remote_url: str | None = None) -> RemoteMetadata | None:
        """Inspect ``directory``, using ``remote_url`` for the path segments."""
        ...
