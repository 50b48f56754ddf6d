"""Pull request review comments."""

from typing import Any, Dict, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url

REVIEW_COMMENT_PARAMS = ("sort", "direction", "since", "page")


class PullRequestCommentsApi(ApiResource):
    """Review comments. By default they are ordered by ascending ID."""

    async def get_pull_request_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        params: Optional[Params] = None
    ) -> Any:
        """
        List comments on a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Pull request number
            params: Optional ``sort`` (created, updated), ``direction``,
                ``since`` (ISO 8601) and ``page``

        Returns:
            List of review comments
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/pulls/{number}/comments", params, REVIEW_COMMENT_PARAMS)
        )

    async def get_repository_comments(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """List review comments across a repository."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/pulls/comments", params, REVIEW_COMMENT_PARAMS)
        )

    async def get_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return await self._client.standard_request(f"/repos/{owner}/{repo}/pulls/comments/{comment_id}")

    async def create_comment(self, owner: str, repo: str, number: int, body: Dict[str, Any]) -> Any:
        """
        Create a review comment.

        ``body`` needs ``body``, ``commit_id``, ``path`` and ``position``, or
        ``body`` and ``in_reply_to`` to answer a top-level comment.
        """
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/pulls/{number}/comments", "post", body
        )

    async def edit_comment(self, owner: str, repo: str, comment_id: int, body: Dict[str, Any]) -> Any:
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/pulls/comments/{comment_id}", "patch", body
        )

    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/pulls/comments/{comment_id}", "delete"
        )
