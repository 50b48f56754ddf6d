"""Repository commits."""

from typing import Any, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url

COMMIT_LIST_PARAMS = ("sha", "path", "author", "since", "until", "page")

SHA_MEDIA_TYPE = "application/vnd.github.VERSION.sha"


class CommitsApi(ApiResource):
    """Commit endpoints."""

    async def get_commits(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """
        List commits on a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            params: Optional query parameters
                - sha: SHA or branch to start listing from
                - path: only commits touching this path
                - author: GitHub login or email address
                - since, until: ISO 8601 timestamps
                - page: page of results

        Returns:
            List of commit objects
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/commits", params, COMMIT_LIST_PARAMS)
        )

    async def get_commit(self, owner: str, repo: str, sha: str) -> Any:
        """Get a single commit."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/commits/{sha}")

    async def get_sha1(self, owner: str, repo: str, ref: str) -> str:
        """
        Get the SHA-1 of a commit reference.

        Uses the ``sha`` media type, so GitHub answers with the bare SHA as
        plain text instead of a commit object.
        """
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/commits/{ref}",
            headers={"Accept": SHA_MEDIA_TYPE}
        )

    async def compare_commits(self, owner: str, repo: str, base: str, head: str) -> Any:
        """
        Compare two commits.

        Both refs must be branches in ``repo``; use ``user:branch`` to compare
        across repositories in the same network.
        """
        return await self._client.standard_request(f"/repos/{owner}/{repo}/compare/{base}...{head}")

    async def verify_signature(self, owner: str, repo: str, sha: str) -> Any:
        """Get a commit; its ``commit.verification`` field carries the signature status."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/commits/{sha}")
