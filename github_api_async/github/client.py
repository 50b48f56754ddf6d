"""GitHub API client: dispatches one HTTP request per call."""

import logging
import threading
from typing import Any, Dict, Optional

import httpx

from ..config import Config, SUPPORTED_VERBS, default_config
from ..utils.errors import HttpError, RateLimitError, TransportError, UnsupportedVerbError
from ..utils.redact import safe_error_message
from .models import ApiResponse, RateLimitInfo


logger = logging.getLogger(__name__)


def _is_binary(content_type: str) -> bool:
    """True for declared media types that are neither JSON nor text."""
    media_type = content_type.split(";")[0].strip().lower()
    if not media_type or "charset=" in content_type.lower():
        return False
    return "json" not in media_type and not media_type.startswith("text/")


def _parse_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text; None when empty.

    Binary payloads such as archive downloads are returned as raw bytes.
    """
    if not response.content:
        return None
    if _is_binary(httpx.Headers(response.headers).get("content-type", "")):
        return response.content
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(status: int, body: Any) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if isinstance(body, str) and body.strip():
        return body.strip()
    return f"HTTP {status}"


class GitHubClient:
    """Client for issuing requests against the GitHub REST API.

    Each call opens a short-lived ``httpx.AsyncClient``, sends exactly one
    request and returns the parsed body. Nothing is retried or cached.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the GitHub API client.

        Args:
            config: Connection settings; the process-wide default when omitted
            transport: Optional httpx transport handed to every AsyncClient
        """
        self.config = config if config is not None else default_config
        self._transport = transport
        self._request_count = 0
        self._count_lock = threading.Lock()
        logger.debug(f"GitHubClient initialized for {self.config.host}")

    @property
    def request_count(self) -> int:
        """Number of requests dispatched so far, failed ones included."""
        return self._request_count

    def _normalize_verb(self, verb: Optional[str]) -> str:
        method = (verb or "").strip().lower()
        if method not in SUPPORTED_VERBS:
            raise UnsupportedVerbError(verb)
        return method

    def _count_request(self) -> None:
        with self._count_lock:
            self._request_count += 1

    def _build_http_client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {
            "base_url": self.config.host,
            "timeout": self.config.timeout,
            "follow_redirects": True,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    def _build_headers(self, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        request_headers = self.config.auth_headers()
        if headers:
            request_headers.update(headers)
        return request_headers

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        body: Any,
        headers: Dict[str, str]
    ) -> httpx.Response:
        if method == "get":
            return await client.get(url, headers=headers)
        if method == "delete":
            return await client.delete(url, headers=headers)

        payload: Dict[str, Any] = {}
        if isinstance(body, (bytes, bytearray)):
            payload["content"] = bytes(body)
        elif body is not None:
            payload["json"] = body

        if method == "post":
            return await client.post(url, headers=headers, **payload)
        if method == "patch":
            return await client.patch(url, headers=headers, **payload)
        return await client.put(url, headers=headers, **payload)

    def _log_request_success(
        self,
        method: str,
        url: str,
        status: int,
        rate_info: RateLimitInfo
    ) -> None:
        """Log status and rate limit state when the debug flag is on."""
        if self.config.debug is not True:
            return

        logger.debug(f"[{status}][{method.upper()} {httpx.URL(url).path}]")
        if rate_info.is_present():
            logger.debug(
                f"Requests remaining: {rate_info.remaining}/{rate_info.limit}, "
                f"reset at {rate_info.reset_at}"
            )

    def _raise_for_status(
        self,
        method: str,
        url: str,
        status: int,
        body: Any,
        rate_info: RateLimitInfo
    ) -> None:
        if status < 400:
            return

        message = _error_message(status, body)

        # GitHub reports primary rate limits as 403, secondary ones as 429
        if status == 429 or (
            status == 403 and (rate_info.remaining == 0 or "rate limit" in message.lower())
        ):
            raise RateLimitError(
                status,
                message,
                body,
                reset_at=rate_info.reset,
                limit_remaining=rate_info.remaining or 0
            )

        raise HttpError(status, message, body, {"method": method.upper(), "url": url})

    async def extended_request(
        self,
        url: str,
        verb: str = "get",
        body: Any = None,
        headers: Optional[Dict[str, str]] = None
    ) -> ApiResponse:
        """
        Send a request and return the parsed body together with the headers.

        Args:
            url: Path relative to ``config.host`` or an absolute URL
            verb: One of get, post, patch, put, delete (any case)
            body: JSON payload for post/patch/put, raw bytes for uploads;
                ignored for get/delete
            headers: Extra headers merged over the defaults

        Returns:
            ApiResponse with status, body, and headers

        Raises:
            UnsupportedVerbError: Before any I/O, if the verb is not supported
            ValidationError: If ``config.host`` is not a usable base URL
            TransportError: If no response was received
            RateLimitError: If GitHub rejected the request for rate limiting
            HttpError: For any other 4xx/5xx response
        """
        method = self._normalize_verb(verb)
        self.config.validate()
        request_headers = self._build_headers(headers)

        self._count_request()

        try:
            async with self._build_http_client() as client:
                response = await self._send(client, method, url, body, request_headers)
        except httpx.RequestError as e:
            raise TransportError(
                safe_error_message(e, f"{method.upper()} {url} failed"),
                {"method": method.upper(), "url": url}
            ) from e

        response_headers = httpx.Headers(response.headers)
        rate_info = RateLimitInfo.from_headers(response_headers)
        data = _parse_body(response)

        self._raise_for_status(method, url, response.status_code, data, rate_info)
        self._log_request_success(method, url, response.status_code, rate_info)

        return ApiResponse(status=response.status_code, body=data, headers=response_headers)

    async def standard_request(
        self,
        url: str,
        verb: str = "get",
        body: Any = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """Send a request and return only the parsed response body."""
        response = await self.extended_request(url, verb, body, headers)
        return response.body


# Process-wide client bound to the default config
_default_client: Optional[GitHubClient] = None


def get_default_client() -> GitHubClient:
    """Get or create the client that uses the process-wide default config."""
    global _default_client
    if _default_client is None:
        _default_client = GitHubClient(default_config)
    return _default_client


def reset_default_client() -> None:
    """Forget the default client; the next lookup starts a fresh counter."""
    global _default_client
    _default_client = None


class ApiResource:
    """Base for endpoint groups; binds them to a client."""

    def __init__(self, client: Optional[GitHubClient] = None):
        self._client = client if client is not None else get_default_client()

    @property
    def config(self) -> Config:
        return self._client.config
