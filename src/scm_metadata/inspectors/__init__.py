"""Repository inspectors."""

from scm_metadata.inspectors.base import RepositoryInspector
from scm_metadata.inspectors.git import GitRepositoryInspector
from scm_metadata.inspectors.registry import InspectorRegistry, default_registry

__all__ = [
    "RepositoryInspector",
    "GitRepositoryInspector",
    "InspectorRegistry",
    "default_registry",
]
