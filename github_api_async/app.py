"""Entry point grouping every endpoint module behind one object."""

import logging
from types import SimpleNamespace
from typing import Optional

from .activity.events import EventsApi
from .config import Config
from .github.client import GitHubClient, get_default_client
from .issues.comments import IssueCommentsApi
from .issues.events import IssueEventsApi
from .issues.issues import IssuesApi
from .pull_requests.comments import PullRequestCommentsApi
from .pull_requests.pull_requests import PullRequestsApi
from .repositories.collaborators import CollaboratorsApi
from .repositories.commits import CommitsApi
from .repositories.contents import ContentsApi
from .repositories.releases import ReleasesApi
from .repositories.repositories import RepositoriesApi
from .teams.teams import TeamsApi


logger = logging.getLogger(__name__)


class GitHubApi:
    """
    All endpoint groups sharing one client.

    Example:
        api = GitHubApi(Config(token="ghp_..."))
        issues = await api.issues.issues.get_repository_issues("octocat", "hello-world")

    Without arguments the process-wide default client and config are used.
    """

    def __init__(self, config: Optional[Config] = None, client: Optional[GitHubClient] = None):
        if client is None:
            client = GitHubClient(config) if config is not None else get_default_client()
        self.client = client

        self.activity = SimpleNamespace(events=EventsApi(client))
        self.issues = SimpleNamespace(
            comments=IssueCommentsApi(client),
            events=IssueEventsApi(client),
            issues=IssuesApi(client),
        )
        self.pull_requests = SimpleNamespace(
            comments=PullRequestCommentsApi(client),
            pull_requests=PullRequestsApi(client),
        )
        self.repositories = SimpleNamespace(
            collaborators=CollaboratorsApi(client),
            commits=CommitsApi(client),
            contents=ContentsApi(client),
            releases=ReleasesApi(client),
            repositories=RepositoriesApi(client),
        )
        # Alias kept for callers using the short name
        self.repos = self.repositories
        self.teams = SimpleNamespace(teams=TeamsApi(client))

        logger.debug(f"GitHubApi ready for {client.config.host}")

    @property
    def config(self) -> Config:
        return self.client.config

    def get_request_count(self) -> int:
        """Number of requests dispatched through this API's client."""
        return self.client.request_count
