"""Append a highlight to its note: fetch or create, append, commit."""

import base64
import time
from typing import Protocol

from .exceptions import ConflictError, StoreError
from .formatter import append_entry, commit_message, format_header
from .logger import get_logger
from .models import (
    CommitOutcome,
    CommitRequest,
    Failed,
    FetchResult,
    Found,
    Highlight,
    Missing,
    StoredFile,
)
from .utils import path_from_highlight

logger = get_logger(__name__)


class ContentStore(Protocol):
    def lookup(self, path: str) -> FetchResult: ...

    def write(self, path: str, commit: CommitRequest) -> None: ...


def _load_or_create(store: ContentStore, path: str, highlight: Highlight) -> StoredFile:
    result = store.lookup(path)
    if isinstance(result, Found):
        return result.file
    if isinstance(result, Missing):
        logger.info(f"No note at {path} yet, creating it")
        name = path.rsplit("/", 1)[-1]
        return StoredFile(name=name, path=path, content=format_header(highlight))
    if isinstance(result, Failed):
        raise result.error
    raise TypeError(f"Unexpected fetch result: {result!r}")


def _append_once(store: ContentStore, highlight: Highlight, path: str, branch: str) -> bool:
    stored = _load_or_create(store, path, highlight)
    append_entry(stored, highlight)
    commit = CommitRequest(
        message=commit_message(highlight),
        content=base64.b64encode(stored.content.encode("utf-8")).decode("ascii"),
        revision=stored.revision,
        branch=branch,
    )
    store.write(path, commit)
    return not stored.revision


def append_highlight(
    highlight: Highlight,
    store: ContentStore,
    retries: int = 0,
    base_delay: float = 0.5,
    branch: str = "",
) -> CommitOutcome:
    """Append a highlight to the note for its page and commit it.

    With retries=0 a rejected write fails immediately. Otherwise a
    ConflictError restarts the whole read-append-write cycle with a fresh
    revision, up to `retries` more times, backing off exponentially.

    Raises:
        StoreError: if the fetch or the final write attempt fails.
    """
    path = path_from_highlight(highlight)
    attempt = 0

    while True:
        attempt += 1
        try:
            created = _append_once(store, highlight, path, branch)
        except ConflictError as e:
            if attempt > retries:
                logger.error(
                    f"Failed to commit {path}: status={e.status} body={e.body}"
                )
                raise
            # base_delay, 2 * base_delay, 4 * base_delay, ...
            delay = base_delay * (2 ** (attempt - 1))
            logger.warning(
                f"Revision conflict on {path}, retrying in {delay:.1f}s "
                f"({attempt}/{retries})"
            )
            time.sleep(delay)
            continue
        except StoreError as e:
            logger.error(f"Store failure on {path}: status={e.status} body={e.body}")
            raise

        logger.info(f"Committed highlight from {highlight.host} to {path}")
        return CommitOutcome(path=path, created=created, attempts=attempt)
