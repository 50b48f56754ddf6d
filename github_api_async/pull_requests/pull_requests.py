"""Pull requests."""

from typing import Any, Dict, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url

PULL_LIST_PARAMS = ("state", "head", "base", "sort", "direction", "page")
MERGE_PARAMS = ("commit_message", "sha", "merge_method", "page")


class PullRequestsApi(ApiResource):
    """Pull request endpoints."""

    async def get_pull_requests(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """
        List pull requests.

        Args:
            owner: Repository owner
            repo: Repository name
            params: Optional query parameters
                - state: open, closed, all
                - head: filter by head user and branch, "user:ref-name"
                - base: filter by base branch name
                - sort: created, updated, popularity, long-running
                - direction: asc or desc
                - page: page of results

        Returns:
            List of pull request objects
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/pulls", params, PULL_LIST_PARAMS)
        )

    async def get_pull_request(self, owner: str, repo: str, number: int) -> Any:
        """Get a single pull request."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/pulls/{number}")

    async def create_pull_request(self, owner: str, repo: str, body: Dict[str, Any]) -> Any:
        """
        Create a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            body: ``title``, ``head`` and ``base`` are required; ``body`` and
                ``maintainer_can_modify`` are optional

        Returns:
            The created pull request
        """
        return await self._client.standard_request(f"/repos/{owner}/{repo}/pulls", "post", body)

    async def update_pull_request(self, owner: str, repo: str, number: int, body: Dict[str, Any]) -> Any:
        """Update a pull request's title, body, state, base or maintainer_can_modify."""
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/pulls/{number}", "patch", body
        )

    async def get_pull_request_commits(
        self,
        owner: str,
        repo: str,
        number: int,
        params: Optional[Params] = None
    ) -> Any:
        """List commits on a pull request."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/pulls/{number}/commits", params, ("page",))
        )

    async def get_pull_request_files(
        self,
        owner: str,
        repo: str,
        number: int,
        params: Optional[Params] = None
    ) -> Any:
        """List files changed by a pull request."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/pulls/{number}/files", params, ("page",))
        )

    async def get_is_merged(self, owner: str, repo: str, number: int) -> Any:
        """
        Check whether a pull request has been merged.

        GitHub answers 204 when merged (resolves to None) and 404 otherwise
        (raises HttpError with status 404).
        """
        return await self._client.standard_request(f"/repos/{owner}/{repo}/pulls/{number}/merge")

    async def merge(self, owner: str, repo: str, number: int, params: Optional[Params] = None) -> Any:
        """
        Merge a pull request (Merge Button).

        Args:
            owner: Repository owner
            repo: Repository name
            number: Pull request number
            params: Optional ``commit_message``, ``sha`` (head must match)
                and ``merge_method`` (merge, squash, rebase), sent as query
                parameters

        Returns:
            Merge result with ``sha``, ``merged`` and ``message``
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/pulls/{number}/merge", params, MERGE_PARAMS),
            "put"
        )
