"""Issues: listing, reading, creating, editing, and locking."""

from typing import Any, Dict, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url

ISSUE_LIST_PARAMS = ("filter", "state", "labels", "sort", "direction", "since", "page")

REPOSITORY_ISSUE_PARAMS = (
    "milestone",
    "state",
    "assignee",
    "creator",
    "mentioned",
    "labels",
    "sort",
    "direction",
    "since",
    "page",
)


class IssuesApi(ApiResource):
    """Issue endpoints."""

    async def get_issues(self, params: Optional[Params] = None) -> Any:
        """
        List issues assigned to the authenticated user across all visible
        repositories, including owned, member, and organization repositories.

        Args:
            params: Optional query parameters
                - filter: assigned, created, mentioned, subscribed, all
                - state: open, closed, all
                - labels: comma separated label names
                - sort: created, updated, comments
                - direction: asc or desc
                - since: ISO 8601 timestamp
                - page: page of results

        Returns:
            List of issue objects
        """
        return await self._client.standard_request(build_url("/issues", params, ISSUE_LIST_PARAMS))

    async def get_user_issues(self, params: Optional[Params] = None) -> Any:
        """List issues across owned and member repositories assigned to the authenticated user."""
        return await self._client.standard_request(
            build_url("/user/issues", params, ISSUE_LIST_PARAMS)
        )

    async def get_organization_issues(self, org: str, params: Optional[Params] = None) -> Any:
        """List issues in an organization assigned to the authenticated user."""
        return await self._client.standard_request(
            build_url(f"/orgs/{org}/issues", params, ISSUE_LIST_PARAMS)
        )

    async def get_repository_issues(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """
        List issues for a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            params: Optional query parameters; ``milestone``, ``assignee``,
                ``creator`` and ``mentioned`` in addition to the filters
                accepted by :meth:`get_issues` (except ``filter``)

        Returns:
            List of issue objects
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/issues", params, REPOSITORY_ISSUE_PARAMS)
        )

    async def get_repository_issue(self, owner: str, repo: str, number: int) -> Any:
        """Get a single issue."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/issues/{number}")

    async def create_issue(self, owner: str, repo: str, body: Dict[str, Any]) -> Any:
        """
        Create an issue. Any user with pull access to a repository can create one.

        Args:
            owner: Repository owner
            repo: Repository name
            body: Issue fields; ``title`` is required, ``body``, ``assignees``,
                ``milestone`` and ``labels`` are optional

        Returns:
            The created issue
        """
        return await self._client.standard_request(f"/repos/{owner}/{repo}/issues", "post", body)

    async def update_issue(self, owner: str, repo: str, number: int, body: Dict[str, Any]) -> Any:
        """Edit an issue. Issue owners and users with push access can edit."""
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/issues/{number}", "patch", body
        )

    async def lock_issue(self, owner: str, repo: str, number: int) -> Any:
        """Lock an issue's conversation. Requires push access."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/issues/{number}/lock", "put")

    async def unlock_issue(self, owner: str, repo: str, number: int) -> Any:
        """Unlock an issue's conversation. Requires push access."""
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/issues/{number}/lock", "delete"
        )
