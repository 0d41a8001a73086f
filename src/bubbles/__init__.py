"""Append web page highlights to Markdown notes in a GitHub repository."""

from .handler import RequestHandler, main

__all__ = ["RequestHandler", "main"]
