"""Markdown formatting for highlight notes."""

from .models import Highlight, StoredFile
from .utils import get_tag


def format_header(highlight: Highlight) -> str:
    """Header written once, when the note for a page is created."""
    return f"# [{highlight.title}]({highlight.url})\n#{get_tag(highlight.host)}\n"


def format_entry(highlight: Highlight) -> str:
    """Separator plus highlight text, appended for every highlight."""
    return f"\n---\n\n{highlight.text}\n"


def append_entry(stored: StoredFile, highlight: Highlight) -> StoredFile:
    """Append the highlight to the file content in place."""
    stored.content += format_entry(highlight)
    return stored


def commit_message(highlight: Highlight) -> str:
    return f"add new highlight from {highlight.host}"
