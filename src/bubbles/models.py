"""Data models for bubbles."""

from dataclasses import dataclass, field
from typing import Union

from .exceptions import StoreError


@dataclass
class Highlight:
    """A snippet of text clipped from a web page."""

    host: str
    path: str
    title: str
    text: str
    url: str


@dataclass
class StoredFile:
    """A file as seen in the content store.

    An empty revision means the file does not exist in the store yet.
    """

    name: str
    path: str
    revision: str = ""
    content: str = ""  # decoded text, not base64


@dataclass
class CommitRequest:
    """Body of a revision-checked write."""

    message: str
    content: str  # base64 encoded
    revision: str = ""
    branch: str = ""

    def to_payload(self) -> dict:
        payload = {"message": self.message, "content": self.content}
        if self.revision:
            payload["sha"] = self.revision
        if self.branch:
            payload["branch"] = self.branch
        return payload


@dataclass
class Response:
    """Envelope returned to the function runtime."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_dict(self) -> dict:
        envelope: dict = {"statusCode": self.status_code}
        if self.headers:
            envelope["headers"] = dict(self.headers)
        if self.body:
            envelope["body"] = self.body
        return envelope


@dataclass
class Found:
    file: StoredFile


@dataclass
class Missing:
    path: str


@dataclass
class Failed:
    error: StoreError


FetchResult = Union[Found, Missing, Failed]


@dataclass
class CommitOutcome:
    """Result of a successful append."""

    path: str
    created: bool
    attempts: int = 1
