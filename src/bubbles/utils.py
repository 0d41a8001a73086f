"""Utility functions for bubbles."""

from urllib.parse import quote

from .models import Highlight

# Reserved characters a single path segment may keep unescaped (RFC 3986 §3.3).
# "/", ";", "," and "?" are always escaped.
_SEGMENT_SAFE = "$&+:=@"


def escape_segment(value: str) -> str:
    """Percent-encode text for use as exactly one URL path segment."""
    return quote(value, safe=_SEGMENT_SAFE)


def get_tag(host: str) -> str:
    """Derive a short tag from a hostname.

    >>> get_tag("blog.example.com")
    'example'
    >>> get_tag("localhost")
    'localhost'
    """
    labels = host.split(".")
    if len(labels) < 2:
        return host
    return labels[-2]


def default_title(path: str) -> str:
    """Turn a page path into a title usable as a filename stem."""
    return path.replace("/", "-")


def path_from_highlight(highlight: Highlight) -> str:
    """Store path of the note a highlight is appended to."""
    return f"{escape_segment(highlight.host)}/{escape_segment(highlight.title)}.md"
