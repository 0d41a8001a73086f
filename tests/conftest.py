"""Shared fixtures for bubbles tests."""

import pytest

from bubbles.config import Config
from bubbles.models import Missing, StoredFile


class FakeStore:
    """In-memory content store recording every call.

    `lookups` is consumed one entry per lookup call; the last entry repeats.
    `write_errors` is consumed one entry per write call; None means success.
    """

    def __init__(self, lookups=None, write_errors=None):
        self.lookups = list(lookups or [])
        self.write_errors = list(write_errors or [])
        self.lookup_calls = []
        self.write_calls = []

    def lookup(self, path):
        self.lookup_calls.append(path)
        if not self.lookups:
            return Missing(path)
        if len(self.lookups) > 1:
            return self.lookups.pop(0)
        return self.lookups[0]

    def write(self, path, commit):
        self.write_calls.append((path, commit))
        if self.write_errors:
            error = self.write_errors.pop(0)
            if error is not None:
                raise error

    @property
    def calls(self):
        return len(self.lookup_calls) + len(self.write_calls)


@pytest.fixture
def config():
    return Config(
        github_owner="mo-rieger",
        github_repo="foambubble-highlights",
        github_token="pat-123",
        auth_secret="right",
    )


@pytest.fixture
def payload():
    return {
        "host": "blog.example.com",
        "path": "/posts/hello",
        "url": "https://blog.example.com/posts/hello",
        "text": "A highlighted sentence.",
        "title": "Hello World",
        "token": "right",
    }


@pytest.fixture
def existing_file():
    return StoredFile(
        name="Hello%20World.md",
        path="blog.example.com/Hello World.md",
        revision="abc",
        content="OLD",
    )


@pytest.fixture
def make_store():
    def _make(lookups=None, write_errors=None):
        return FakeStore(lookups=lookups, write_errors=write_errors)

    return _make

