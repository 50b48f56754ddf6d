"""Configuration and constants for the GitHub API client."""

import os
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from .utils.errors import ValidationError

# GitHub API Configuration
GITHUB_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "github-api-async"

# HTTP verbs the dispatcher accepts
SUPPORTED_VERBS = ("get", "post", "patch", "put", "delete")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Connection settings shared by every request a client makes.

    The record is expected to be filled in once at startup. Fields may be
    reassigned before the first call; requests always read the current values.
    """

    host: str = GITHUB_API_BASE
    token: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from GITHUB_* environment variables."""
        timeout = os.getenv("GITHUB_API_TIMEOUT")
        return cls(
            host=os.getenv("GITHUB_API_HOST") or GITHUB_API_BASE,
            token=os.getenv("GITHUB_TOKEN"),
            owner=os.getenv("GITHUB_OWNER"),
            repo=os.getenv("GITHUB_REPO"),
            debug=_env_flag("GITHUB_API_DEBUG"),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

    def validate(self) -> None:
        """Check that ``host`` is usable as a base URL.

        Raises:
            ValidationError: If the host is not an absolute http(s) URL
        """
        try:
            url = httpx.URL(self.host or "")
        except (httpx.InvalidURL, TypeError) as e:
            raise ValidationError(f"Invalid host URL: {e}", field="host")
        if url.scheme not in ("http", "https") or not url.host:
            raise ValidationError(
                f"Host must be an absolute http(s) URL, got {self.host!r}",
                field="host"
            )

    def auth_headers(self) -> Dict[str, str]:
        """Get the headers attached to every request."""
        headers = {"User-Agent": self.user_agent}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers


# Process-wide default, mutated in place by the embedding application
default_config = Config.from_env()
