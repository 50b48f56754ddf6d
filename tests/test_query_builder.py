"""Tests for query string assembly and URL building."""

import pytest
from github_api_async.github.query_builder import assemble_query_params, build_url


def test_single_whitelisted_param():
    assert assemble_query_params({"page": 2}, ["page"]) == "page=2"


def test_non_whitelisted_params_are_dropped():
    assert assemble_query_params({"page": 2, "sort": "created"}, ["sort"]) == "sort=created"


def test_output_follows_whitelist_order():
    params = {"page": 3, "state": "open", "sort": "updated"}

    query = assemble_query_params(params, ["sort", "state", "page"])

    assert query == "sort=updated&state=open&page=3"


def test_space_is_percent_encoded():
    assert assemble_query_params({"q": "a b"}, ["q"]) == "q=a%20b"


def test_values_are_encoded_like_encode_uri_component():
    params = {"labels": "bug,ui,@high", "head": "octocat:new/feature", "q": "it's (fine)!"}

    query = assemble_query_params(params, ["labels", "head", "q"])

    assert query == "labels=bug%2Cui%2C%40high&head=octocat%3Anew%2Ffeature&q=it's%20(fine)!"


def test_booleans_render_lowercase():
    assert assemble_query_params({"all": True}, ["all"]) == "all=true"


@pytest.mark.parametrize("params", [None, {}])
def test_missing_params_give_empty_string(params):
    assert assemble_query_params(params, ["page", "sort"]) == ""


def test_empty_whitelist_gives_empty_string():
    assert assemble_query_params({"page": 2, "sort": "created"}, []) == ""


@pytest.mark.parametrize("value", [None, 0, False, ""])
def test_falsy_values_are_omitted(value):
    assert assemble_query_params({"page": value}, ["page"]) == ""


def test_falsy_values_do_not_leave_separators():
    query = assemble_query_params({"state": "", "sort": "created", "page": 0}, ["state", "sort", "page"])

    assert query == "sort=created"
    assert not query.startswith("&")
    assert not query.startswith("?")


def test_include_falsy_forwards_zero_false_and_empty():
    params = {"page": 0, "private": False, "label": "", "sort": None}

    query = assemble_query_params(params, ["page", "private", "label", "sort"], include_falsy=True)

    assert query == "page=0&private=false&label="


def test_assembly_is_idempotent():
    params = {"state": "closed", "since": "2024-01-01T00:00:00Z", "page": 4}
    names = ["state", "since", "page"]

    assert assemble_query_params(params, names) == assemble_query_params(params, names)
    assert params == {"state": "closed", "since": "2024-01-01T00:00:00Z", "page": 4}


def test_only_whitelisted_keys_appear():
    params = {"a": 1, "b": 2, "c": 3, "d": 4}

    query = assemble_query_params(params, ["b", "d"])

    keys = [pair.split("=")[0] for pair in query.split("&")]
    assert keys == ["b", "d"]


def test_build_url_appends_query():
    assert build_url("/repos/o/r/issues", {"state": "open"}, ["state"]) == "/repos/o/r/issues?state=open"


def test_build_url_without_query_has_no_question_mark():
    assert build_url("/repos/o/r/issues", {"state": ""}, ["state"]) == "/repos/o/r/issues"
    assert build_url("/events") == "/events"


def test_build_url_extends_existing_query():
    assert build_url("/search?q=x", {"page": 2}, ["page"]) == "/search?q=x&page=2"


def test_build_url_include_falsy():
    url = build_url("/user/repos", {"page": 0, "private": False}, ["private", "page"], include_falsy=True)

    assert url == "/user/repos?private=false&page=0"
