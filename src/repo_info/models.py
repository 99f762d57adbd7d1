"""Data models for repo-info."""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt, RootModel

from repo_info.exceptions import InvalidRepositoryError

_NAME_PART = re.compile(r"^[A-Za-z0-9_.-]+$")


# ── Input ─────────────────────────────────────────────────────────────────

class RepositoryRef(BaseModel):
    """An ``owner/name`` pair identifying a GitHub repository."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @classmethod
    def parse(cls, value: str) -> "RepositoryRef":
        """Parse a single ``owner/name`` token."""
        value = value.strip()
        parts = value.split("/")
        if len(parts) != 2:
            raise InvalidRepositoryError(
                f"'{value}' is not a valid repository, expected owner/name"
            )
        owner, name = parts
        if not owner or not name:
            raise InvalidRepositoryError("Both owner and repository name are required")
        for part in parts:
            if part in (".", "..") or not _NAME_PART.match(part):
                raise InvalidRepositoryError(
                    f"'{part}' contains characters not allowed in a repository path"
                )
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


# ── Raw GitHub data ───────────────────────────────────────────────────────

class RepositoryInfo(BaseModel):
    """Repository metadata as returned by ``GET /repos/{owner}/{name}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    full_name: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: NonNegativeInt
    size: NonNegativeInt  # kilobytes
    forks: NonNegativeInt
    open_issues: NonNegativeInt
    default_branch: str
    updated_at: str
    html_url: str


class LanguageStats(RootModel[dict[str, NonNegativeInt]]):
    """Language name → byte count, as returned by the ``/languages`` endpoint."""

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.root)

    @property
    def total(self) -> int:
        return sum(self.root.values())

    def ordered(self) -> list[tuple[str, int]]:
        """Entries by descending byte count, ties broken by name."""
        return sorted(self.root.items(), key=lambda item: (-item[1], item[0]))


class Repository(BaseModel):
    """Everything fetched for one repository."""

    model_config = ConfigDict(frozen=True)

    info: RepositoryInfo
    languages: LanguageStats


# ── Rendering ─────────────────────────────────────────────────────────────

class LanguageShare(BaseModel):
    """One computed row of the language chart."""

    name: str
    byte_count: int
    percentage: str
    bar_length: int
