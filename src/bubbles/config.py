"""Configuration loading and validation."""

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Config:
    """Process-wide configuration, read once at startup."""

    github_owner: str = ""
    github_repo: str = ""
    github_token: str = ""
    auth_secret: str = ""
    api_url: str = DEFAULT_API_URL
    branch: str = ""
    timeout: float = 10.0
    conflict_retries: int = 0
    log_level: str = "INFO"

    @property
    def contents_url(self) -> str:
        return (
            f"{self.api_url.rstrip('/')}/repos/"
            f"{self.github_owner}/{self.github_repo}/contents"
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.github_owner:
            raise ConfigError(
                "GITHUB_OWNER is required. Set it in .env or environment."
            )
        if not self.github_repo:
            raise ConfigError(
                "GITHUB_REPO is required. Set it in .env or environment."
            )
        if not self.github_token:
            raise ConfigError(
                "GH_PAT is required. Set it in .env or environment."
            )
        if not self.auth_secret:
            raise ConfigError(
                "AUTH_TOKEN is required. Set it in .env or environment."
            )
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigError("timeout must be positive.")
        if self.conflict_retries < 0:
            raise ConfigError("conflict_retries cannot be negative.")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(
                f"Unknown LOG_LEVEL {self.log_level!r}. Use DEBUG, INFO, WARNING, ERROR or CRITICAL."
            )


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}.") from e


def load_config(
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    branch: Optional[str] = None,
    timeout: Optional[float] = None,
    conflict_retries: Optional[int] = None,
    log_level: Optional[str] = None,
) -> Config:
    """Load config from .env and apply explicit overrides."""
    load_dotenv()

    config = Config(
        github_owner=owner or os.getenv("GITHUB_OWNER", ""),
        github_repo=repo or os.getenv("GITHUB_REPO", ""),
        github_token=os.getenv("GH_PAT", ""),
        auth_secret=os.getenv("AUTH_TOKEN", ""),
        api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
        branch=branch if branch is not None else os.getenv("GITHUB_BRANCH", ""),
        timeout=timeout if timeout is not None else _env_number(
            "REQUEST_TIMEOUT", "10", float
        ),
        conflict_retries=conflict_retries if conflict_retries is not None else _env_number(
            "CONFLICT_RETRIES", "0", int
        ),
        log_level=(log_level or os.getenv("LOG_LEVEL", "INFO")).upper(),
    )

    config.validate()
    return config
