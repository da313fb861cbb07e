"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog

from scm_metadata.config.settings import get_settings
from scm_metadata.core.models.metadata import RemoteMetadata


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, capture_output=True, check=True)


@pytest.fixture(autouse=True)
def reset_state():
    """Reset cached settings and logging configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one commit and an origin remote."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "remote", "add", "origin", "git@example.com:org/repo.git")

    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "entity.md").write_text("# Entity\n\nContent here.\n")
    (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")

    return repo_path


@pytest.fixture
def sample_metadata() -> RemoteMetadata:
    """Metadata of a clean checkout of https://example.com/org/repo.git."""
    return RemoteMetadata(
        branch="main",
        revision="abcdef1234567890",
        uncommitted_changes_present=False,
        remote_path_segments=("org", "repo"),
    )
