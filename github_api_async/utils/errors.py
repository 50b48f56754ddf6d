"""Structured error handling utilities."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Configure module logger
logger = logging.getLogger(__name__)


class ErrorCode:
    """Standardized error codes for consistent error handling."""
    UNSUPPORTED_VERB = "UNSUPPORTED_VERB"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    GITHUB_RATE_LIMIT = "GITHUB_RATE_LIMIT"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class GitHubError(Exception):
    """Base exception for GitHub API client errors.

    Every error is logged when it is raised, regardless of the debug flag.
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
        logger.error(f"GitHubError ({code}): {message}", extra={"details": self.details})

    def to_dict(self) -> dict:
        """Convert error to standardized dictionary format."""
        return {
            "ok": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details
            }
        }

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)


class UnsupportedVerbError(GitHubError):
    """Raised when a request uses an HTTP verb the client does not dispatch."""
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(ErrorCode.UNSUPPORTED_VERB, f"Unsupported HTTP verb: {verb}", {"verb": verb})


class TransportError(GitHubError):
    """Network-level failure with no HTTP response."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.status = None
        super().__init__(ErrorCode.TRANSPORT_ERROR, message, details)


class HttpError(GitHubError):
    """A response was received with an error status."""
    def __init__(
        self,
        status: int,
        message: str,
        body: Any = None,
        details: Optional[Dict[str, Any]] = None,
        code: str = ErrorCode.HTTP_ERROR
    ):
        self.status = status
        self.body = body
        full_details = details or {}
        full_details["status_code"] = status
        super().__init__(code, message, full_details)


class RateLimitError(HttpError):
    """Exception for GitHub API rate limit errors (403 or 429)."""
    def __init__(
        self,
        status: int,
        message: str = "GitHub API rate limit exceeded",
        body: Any = None,
        reset_at: Optional[int] = None,
        limit_remaining: int = 0
    ):
        self.reset_at = reset_at
        self.limit_remaining = limit_remaining
        details = {
            "limit_remaining": limit_remaining,
            "hint": "Wait for the rate limit window to reset or authenticate with a token"
        }
        if reset_at:
            details["resets_at"] = datetime.fromtimestamp(reset_at, tz=timezone.utc).isoformat()
        super().__init__(status, message, body, details, code=ErrorCode.GITHUB_RATE_LIMIT)


class ValidationError(GitHubError):
    """Exception for input validation errors."""
    def __init__(self, message: str, field: Optional[str] = None):
        details = {}
        if field:
            details["field"] = field
        super().__init__(ErrorCode.VALIDATION_ERROR, message, details)
