"""CLI entry point for bubbles."""

import json
import sys

import click

from .config import load_config
from .exceptions import ConfigError
from .handler import RequestHandler
from .logger import set_level


def _build_handler(verbose: bool) -> RequestHandler:
    try:
        config = load_config(log_level="DEBUG" if verbose else None)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    set_level(config.log_level)
    if verbose:
        click.echo(f"Repository: {config.github_owner}/{config.github_repo}")
    return RequestHandler(config)


@click.group()
def main():
    """Save web page highlights to Markdown notes in a GitHub repository."""


@main.command()
@click.option("--host", required=True, help="Hostname of the page, e.g. blog.example.com")
@click.option("--path", "page_path", required=True, help="Path of the page on the host")
@click.option("--url", required=True, help="Full URL of the page")
@click.option("--text", required=True, help="Highlighted text")
@click.option("--title", default=None, help="Note title (default: path with / replaced by -)")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
def add(host, page_path, url, text, title, verbose):
    """Append one highlight to the note for its page.

    Example: bubbles add --host blog.example.com --path /post --url https://blog.example.com/post --text "Quote"
    """
    handler = _build_handler(verbose)
    payload = {
        "host": host,
        "path": page_path,
        "url": url,
        "text": text,
        "token": handler.config.auth_secret,
    }
    if title is not None:
        payload["title"] = title

    response = handler.handle(payload)
    click.echo(f"Status: {response.status_code}")
    if response.body:
        click.echo(response.body)
    if response.status_code != 201:
        sys.exit(1)


@main.command()
@click.argument("payload_file", type=click.File("r"), default="-")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
def invoke(payload_file, verbose):
    """Run a JSON payload through the function handler.

    Reads PAYLOAD_FILE, or stdin when omitted, and prints the response envelope.
    """
    try:
        args = json.load(payload_file)
    except json.JSONDecodeError as e:
        click.echo(f"Invalid JSON payload: {e}", err=True)
        sys.exit(2)
    if not isinstance(args, dict):
        click.echo("Payload must be a JSON object.", err=True)
        sys.exit(2)

    handler = _build_handler(verbose)
    click.echo(json.dumps(handler.handle(args).to_dict()))
