"""Tests for the error hierarchy."""

import json
import logging

from github_api_async.utils.errors import (
    ErrorCode,
    GitHubError,
    HttpError,
    RateLimitError,
    TransportError,
    UnsupportedVerbError,
    ValidationError,
)


def test_unsupported_verb_carries_verb():
    error = UnsupportedVerbError("head")

    assert error.verb == "head"
    assert error.code == ErrorCode.UNSUPPORTED_VERB
    assert str(error) == "Unsupported HTTP verb: head"


def test_http_error_details_include_status():
    error = HttpError(404, "Not Found", {"message": "Not Found"}, {"method": "GET", "url": "/x"})

    assert error.status == 404
    assert error.body == {"message": "Not Found"}
    assert error.details == {"method": "GET", "url": "/x", "status_code": 404}


def test_transport_error_has_no_status():
    error = TransportError("GET /x failed: ConnectError")

    assert error.status is None
    assert error.code == ErrorCode.TRANSPORT_ERROR


def test_rate_limit_error_is_http_error():
    error = RateLimitError(403, reset_at=1700000000, limit_remaining=0)

    assert isinstance(error, HttpError)
    assert error.code == ErrorCode.GITHUB_RATE_LIMIT
    assert error.message == "GitHub API rate limit exceeded"
    assert error.details["status_code"] == 403
    assert error.details["limit_remaining"] == 0
    assert error.details["resets_at"] == "2023-11-14T22:13:20+00:00"
    assert "hint" in error.details


def test_rate_limit_error_without_reset():
    error = RateLimitError(429, "You have exceeded a secondary rate limit")

    assert error.reset_at is None
    assert "resets_at" not in error.details


def test_validation_error_field():
    assert ValidationError("bad host", field="host").details == {"field": "host"}
    assert ValidationError("bad").details == {}


def test_to_dict_format():
    error = HttpError(422, "Validation Failed")

    assert error.to_dict() == {
        "ok": False,
        "error": {
            "code": ErrorCode.HTTP_ERROR,
            "message": "Validation Failed",
            "details": {"status_code": 422}
        }
    }


def test_to_json_round_trips():
    error = GitHubError("CUSTOM", "boom", {"when": object()})

    data = json.loads(error.to_json())

    assert data["error"]["code"] == "CUSTOM"
    assert isinstance(data["error"]["details"]["when"], str)


def test_errors_are_logged_when_raised(caplog):
    with caplog.at_level(logging.ERROR, logger="github_api_async"):
        HttpError(500, "Server Error")

    assert "GitHubError (HTTP_ERROR): Server Error" in caplog.text
