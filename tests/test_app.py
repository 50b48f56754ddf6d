"""Tests for the GitHubApi entry point."""

import pytest

from github_api_async.app import GitHubApi
from github_api_async.config import Config
from github_api_async.github.client import GitHubClient, get_default_client, reset_default_client
from github_api_async.issues.issues import IssuesApi
from github_api_async.repositories.releases import ReleasesApi


def test_groups_share_one_client(client):
    api = GitHubApi(client=client)

    assert isinstance(api.issues.issues, IssuesApi)
    assert isinstance(api.repositories.releases, ReleasesApi)
    assert api.issues.comments._client is client
    assert api.teams.teams._client is client
    assert api.activity.events._client is client


def test_repos_is_alias_of_repositories(client):
    api = GitHubApi(client=client)

    assert api.repos is api.repositories
    assert api.repos.commits is api.repositories.commits


def test_config_builds_dedicated_client():
    config = Config(token="abc123")

    api = GitHubApi(config)

    assert api.config is config
    assert api.client is not get_default_client()


def test_defaults_to_process_wide_client():
    reset_default_client()
    try:
        assert GitHubApi().client is get_default_client()
    finally:
        reset_default_client()


@pytest.mark.asyncio
async def test_request_count_tracks_calls(client, http):
    api = GitHubApi(client=client)

    await api.issues.issues.get_issues()
    await api.repos.repositories.get_my_repos()

    assert api.get_request_count() == 2
    assert http.get.await_count == 2


@pytest.mark.asyncio
async def test_separate_clients_count_separately(async_client_cls):
    first = GitHubApi(client=GitHubClient(Config(token="a")))
    second = GitHubApi(client=GitHubClient(Config(token="b")))

    await first.activity.events.get_events()

    assert first.get_request_count() == 1
    assert second.get_request_count() == 0
