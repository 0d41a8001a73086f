"""GitHub Contents API client.

The repository is treated as a path-addressed file store: files are read
with GET and written with a revision-checked PUT. The revision is the
blob sha GitHub returns on read; a write carrying a stale sha is rejected.
"""

import base64
import binascii
from typing import Optional

import requests

from .config import Config
from .exceptions import ConflictError, NotFoundError, StoreError
from .logger import get_logger
from .models import CommitRequest, Failed, FetchResult, Found, Missing, StoredFile

logger = get_logger(__name__)

# GitHub answers 409 for a stale sha. 422 is a conflict only when it is about
# the sha (a creation race); otherwise it is a plain validation failure.
CONFLICT_STATUS = 409
VALIDATION_STATUS = 422


def _is_conflict(status: int, body: str, revision: str) -> bool:
    if status == CONFLICT_STATUS:
        return True
    if status == VALIDATION_STATUS:
        return not revision or "sha" in body.lower()
    return False


class ContentStoreClient:
    """Read and write files in one GitHub repository."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self._config = config
        self._base_url = config.contents_url
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {config.github_token}",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "bubbles/0.1",
            }
        )

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    def fetch(self, path: str) -> StoredFile:
        """Fetch a file and decode its content.

        Args:
            path: Store path, already escaped segment by segment.

        Raises:
            NotFoundError: if the store has no file at path.
            StoreError: on any other failure.
        """
        params = {"ref": self._config.branch} if self._config.branch else None
        try:
            response = self.session.get(
                self._url(path), params=params, timeout=self._config.timeout
            )
        except requests.exceptions.RequestException as e:
            raise StoreError(f"Failed to fetch {path}: {e}", body=str(e)) from e

        if response.status_code == 404:
            raise NotFoundError(path)
        if response.status_code >= 400:
            raise StoreError(
                f"Fetching {path} failed with status {response.status_code}",
                status=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
            encoding = data.get("encoding", "base64")
        except (ValueError, AttributeError) as e:
            raise StoreError(
                f"Unreadable response for {path}: {e}",
                status=response.status_code,
                body=response.text,
            ) from e

        # Files over 1 MB come back with encoding "none" and no content
        if encoding != "base64":
            raise StoreError(
                f"Cannot append to {path}: content not returned (encoding {encoding!r})",
                status=response.status_code,
                body=response.text,
            )

        try:
            content = base64.b64decode(data.get("content", "")).decode("utf-8")
        except (ValueError, binascii.Error) as e:
            raise StoreError(
                f"Unreadable content for {path}: {e}",
                status=response.status_code,
                body=response.text,
            ) from e

        return StoredFile(
            name=data.get("name", ""),
            path=data.get("path", path),
            revision=data.get("sha", ""),
            content=content,
        )

    def lookup(self, path: str) -> FetchResult:
        """Fetch a file, reporting found / missing / failed as a value."""
        try:
            return Found(self.fetch(path))
        except NotFoundError:
            return Missing(path)
        except StoreError as e:
            return Failed(e)

    def write(self, path: str, commit: CommitRequest) -> None:
        """Create or update a file.

        Raises:
            ConflictError: if the store rejected the revision.
            StoreError: on any other failure.
        """
        try:
            response = self.session.put(
                self._url(path),
                json=commit.to_payload(),
                timeout=self._config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise StoreError(f"Failed to write {path}: {e}", body=str(e)) from e

        if _is_conflict(response.status_code, response.text, commit.revision):
            raise ConflictError(
                f"Write to {path} rejected, revision {commit.revision or '<none>'} is stale",
                status=response.status_code,
                body=response.text,
            )
        if response.status_code >= 400:
            raise StoreError(
                f"Writing {path} failed with status {response.status_code}",
                status=response.status_code,
                body=response.text,
            )
        logger.debug(f"Wrote {path} (status {response.status_code})")
