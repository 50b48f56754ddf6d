"""Issue comments."""

from typing import Any, Dict, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url


class IssueCommentsApi(ApiResource):
    """Comments on issues. Comments are ordered by ascending ID."""

    async def get_issue_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        params: Optional[Params] = None
    ) -> Any:
        """List comments on an issue."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/issues/{number}/comments", params, ("page",))
        )

    async def get_repository_comments(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """
        List comments in a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            params: Optional ``sort`` (created, updated), ``direction``
                (asc, desc; ignored without sort) and ``since`` (ISO 8601)

        Returns:
            List of comment objects
        """
        return await self._client.standard_request(
            build_url(
                f"/repos/{owner}/{repo}/issues/comments",
                params,
                ("sort", "direction", "since")
            )
        )

    async def get_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return await self._client.standard_request(f"/repos/{owner}/{repo}/issues/comments/{comment_id}")

    async def create_comment(self, owner: str, repo: str, number: int, body: Dict[str, Any]) -> Any:
        """Create a comment; ``body["body"]`` holds the comment text."""
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/issues/{number}/comments", "post", body
        )

    async def edit_comment(self, owner: str, repo: str, comment_id: int, body: Dict[str, Any]) -> Any:
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/issues/comments/{comment_id}", "patch", body
        )

    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/issues/comments/{comment_id}", "delete"
        )
