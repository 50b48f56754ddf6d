"""Shared fixtures: a client with a fixed config and a mocked httpx.AsyncClient."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from github_api_async.config import Config
from github_api_async.github.client import GitHubClient


def _mock_response(status_code=200, json_body=None, headers=None, text=None):
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    resp.headers = headers or {}
    if text is not None:
        resp.content = text.encode()
        resp.text = text
        resp.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
    else:
        resp.content = json.dumps(json_body).encode() if json_body is not None else b""
        resp.text = json.dumps(json_body) if json_body is not None else ""
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def make_response():
    return _mock_response


@pytest.fixture
def config():
    return Config(host="https://api.github.com", token="test-token", owner="octocat", repo="hello-world")


@pytest.fixture
def client(config):
    return GitHubClient(config)


@pytest.fixture
def async_client_cls():
    """Patch httpx.AsyncClient; every verb answers 200 with an empty object."""
    with patch("httpx.AsyncClient") as mock_async_client:
        instance = MagicMock()
        instance.__aenter__.return_value = instance
        instance.__aexit__.return_value = None
        for verb in ("get", "post", "patch", "put", "delete"):
            setattr(instance, verb, AsyncMock(return_value=_mock_response(200, {})))
        mock_async_client.return_value = instance
        yield mock_async_client


@pytest.fixture
def http(async_client_cls):
    """The mocked AsyncClient instance requests are sent through."""
    return async_client_cls.return_value
