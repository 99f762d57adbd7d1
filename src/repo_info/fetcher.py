"""GitHub data fetching via REST API."""

import logging
from typing import Any, Callable, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from repo_info.config import ACCEPT_HEADER, API_BASE_URL, REQUEST_TIMEOUT, USER_AGENT
from repo_info.exceptions import FetchError
from repo_info.models import LanguageStats, Repository, RepositoryInfo, RepositoryRef

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GitHubFetcher:
    """Fetches repository metadata and language stats from the GitHub REST API."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._client: Optional[httpx.Client] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": ACCEPT_HEADER,
            "User-Agent": USER_AGENT,
        }

    def _client_instance(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self._client

    def _get_json(self, path: str) -> Any:
        """GET ``path`` and decode the body, raising FetchError on any failure."""
        logger.debug("GET %s%s", self.base_url, path)
        try:
            resp = self._client_instance().get(path)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise FetchError(str(e)) from e
        except ValueError as e:  # body is not JSON
            logger.warning("Response from %s is not valid JSON: %s", path, e)
            raise FetchError(f"Invalid JSON from {path}: {e}") from e

    def _decode(self, model: type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning("Unexpected payload shape from %s", path)
            raise FetchError(str(e)) from e

    def close(self) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GitHubFetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── Repo metadata ─────────────────────────────────────────────────────

    def fetch_repository_info(self, ref: RepositoryRef) -> RepositoryInfo:
        """Fetch basic repo information."""
        path = f"/repos/{ref.owner}/{ref.name}"
        return self._decode(RepositoryInfo, self._get_json(path), path)

    def fetch_languages(self, ref: RepositoryRef) -> LanguageStats:
        """Fetch the language → byte count breakdown."""
        path = f"/repos/{ref.owner}/{ref.name}/languages"
        return self._decode(LanguageStats, self._get_json(path), path)

    def fetch_repository(
        self,
        ref: RepositoryRef,
        on_progress: Optional[Callable[[], None]] = None,
    ) -> Repository:
        """Fetch info and languages; fails as a whole if either call fails."""
        info = self.fetch_repository_info(ref)
        if on_progress:
            on_progress()
        languages = self.fetch_languages(ref)
        if on_progress:
            on_progress()
        return Repository(info=info, languages=languages)
