"""Tests for the inspector registry."""

import pytest

from scm_metadata.core.exceptions import (
    InspectionError,
    ProviderMismatchError,
    UnsupportedProviderError,
)
from scm_metadata.core.models.metadata import RemoteMetadata
from scm_metadata.inspectors.base import RepositoryInspector
from scm_metadata.inspectors.git import GitRepositoryInspector
from scm_metadata.inspectors.registry import InspectorRegistry, default_registry
from tests.factories import RemoteMetadataFactory


class StubInspector(RepositoryInspector):
    """Inspector returning a fixed result and recording its calls."""

    def __init__(self, provider: str, result: RemoteMetadata | None = None, error: Exception | None = None):
        self.provider = provider
        self._result = result
        self._error = error
        self.calls: list[tuple[str, str | None]] = []

    def inspect(self, directory, remote_url=None):
        self.calls.append((str(directory), remote_url))
        if self._error is not None:
            raise self._error
        return self._result


@pytest.mark.unit
class TestInspectorRegistry:
    """Tests for InspectorRegistry."""

    def test_register_and_get(self) -> None:
        registry = InspectorRegistry()
        inspector = StubInspector("Git")
        registry.register(inspector)
        assert registry.get("git") is inspector
        assert registry.get("GIT") is inspector
        assert registry.get("svn") is None

    def test_duplicate_registration(self) -> None:
        registry = InspectorRegistry()
        registry.register(StubInspector("git"))
        with pytest.raises(ValueError):
            registry.register(StubInspector("GIT"))

    def test_providers_in_registration_order(self) -> None:
        registry = InspectorRegistry()
        for name in ("svn", "git", "hg"):
            registry.register(StubInspector(name))
        assert registry.providers == ["svn", "git", "hg"]

    def test_resolve_provider(self) -> None:
        metadata = RemoteMetadataFactory()
        registry = InspectorRegistry()
        inspector = StubInspector("git", metadata)
        registry.register(inspector)
        assert registry.resolve("/work", "git", "https://host/org/repo") == metadata
        assert inspector.calls == [("/work", "https://host/org/repo")]

    def test_resolve_unsupported(self) -> None:
        registry = InspectorRegistry()
        registry.register(StubInspector("git"))
        with pytest.raises(UnsupportedProviderError, match='Unsupported SCM "svn"'):
            registry.resolve("/work", "svn")

    def test_resolve_mismatch(self) -> None:
        registry = InspectorRegistry()
        registry.register(StubInspector("git", None))
        with pytest.raises(ProviderMismatchError) as exc_info:
            registry.resolve("/work", "git")
        assert exc_info.value.provider == "git"
        assert exc_info.value.directory == "/work"

    def test_resolve_auto_first_applicable(self) -> None:
        metadata = RemoteMetadataFactory()
        registry = InspectorRegistry()
        first = StubInspector("svn", None)
        second = StubInspector("git", metadata)
        third = StubInspector("hg", RemoteMetadataFactory())
        for inspector in (first, second, third):
            registry.register(inspector)
        assert registry.resolve("/work") == metadata
        assert len(first.calls) == 1
        assert third.calls == []

    def test_resolve_auto_none_applicable(self) -> None:
        registry = InspectorRegistry()
        registry.register(StubInspector("git", None))
        with pytest.raises(UnsupportedProviderError, match="automatically determine"):
            registry.resolve("/work")

    def test_resolve_empty_registry(self) -> None:
        with pytest.raises(UnsupportedProviderError):
            InspectorRegistry().resolve("/work")

    def test_inspector_failure_wrapped(self) -> None:
        failure = RuntimeError("boom")
        registry = InspectorRegistry()
        registry.register(StubInspector("git", error=failure))
        with pytest.raises(InspectionError) as exc_info:
            registry.resolve("/work", "git")
        assert exc_info.value.__cause__ is failure
        assert not isinstance(exc_info.value, (UnsupportedProviderError, ProviderMismatchError))

    def test_default_registry(self) -> None:
        registry = default_registry()
        assert registry.providers == ["git"]
        assert isinstance(registry.get("git"), GitRepositoryInspector)
