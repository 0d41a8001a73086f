"""Turn an untyped request payload into a Highlight."""

from typing import Any, Mapping

from .exceptions import ValidationError
from .models import Highlight
from .utils import default_title

# Checked in this order; the first missing field is reported.
REQUIRED_FIELDS = ("path", "text", "host", "url")


def _required(args: Mapping[str, Any], name: str) -> str:
    value = args.get(name)
    if value is None:
        raise ValidationError(name)
    if not isinstance(value, str):
        raise ValidationError(
            name, f"{name} must be a string, got {type(value).__name__}"
        )
    return value


def parse_highlight(args: Mapping[str, Any]) -> Highlight:
    """Validate a request payload and build a Highlight.

    Raises:
        ValidationError: naming the first required field that is missing
            or not a string.
    """
    values = {name: _required(args, name) for name in REQUIRED_FIELDS}

    title = args.get("title")
    if not isinstance(title, str) or not title:
        title = default_title(values["path"])

    return Highlight(title=title, **values)
