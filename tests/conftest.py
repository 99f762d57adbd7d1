"""Pytest configuration and fixtures."""

import pytest

from repo_info.models import RepositoryRef


@pytest.fixture
def ref():
    return RepositoryRef(owner="owner", name="repo")


@pytest.fixture
def repo_payload():
    """A trimmed ``GET /repos/owner/repo`` response, with extra fields."""
    return {
        "id": 1296269,
        "name": "repo",
        "full_name": "owner/repo",
        "private": False,
        "owner": {"login": "owner", "id": 1},
        "description": "A sample repository",
        "language": "Rust",
        "stargazers_count": 1500,
        "watchers_count": 1500,
        "size": 2048,
        "forks": 42,
        "open_issues": 7,
        "default_branch": "main",
        "updated_at": "2025-01-15T10:00:00Z",
        "html_url": "https://github.com/owner/repo",
    }


@pytest.fixture
def languages_payload():
    return {"Rust": 300, "Go": 100, "TypeScript": 100}
