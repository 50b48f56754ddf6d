"""Repository contents: README, files, and archives."""

from typing import Any, Dict, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url


class ContentsApi(ApiResource):

    async def get_readme(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """Get the preferred README; ``params["ref"]`` selects a commit, branch, or tag."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/readme", params, ("ref",))
        )

    async def get_contents(self, owner: str, repo: str, path: str = "", params: Optional[Params] = None) -> Any:
        """
        Get the contents of a file or directory.

        An empty ``path`` lists the repository root.
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/contents/{path}", params, ("ref",))
        )

    async def put_contents(self, owner: str, repo: str, path: str, body: Dict[str, Any]) -> Any:
        """
        Create or update a file.

        Args:
            owner: Repository owner
            repo: Repository name
            path: File path in the repository
            body: ``message`` and base64 ``content`` are required; ``sha`` is
                required when replacing a file; ``branch``, ``committer`` and
                ``author`` are optional

        Returns:
            The content and commit objects
        """
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/contents/{path}", "put", body
        )

    async def delete_contents(self, owner: str, repo: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """
        Delete a file.

        The client never sends a payload with DELETE, so ``body`` (message,
        sha) is not transmitted.
        """
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/contents/{path}", "delete", body
        )

    async def get_archive_link(self, owner: str, repo: str, archive_format: str, ref: str = "") -> Any:
        """
        Download a tarball or zipball archive.

        GitHub redirects to a temporary download URL; the redirect is
        followed and the archive is returned as raw bytes.
        """
        path = f"/repos/{owner}/{repo}/{archive_format}"
        if ref:
            path = f"{path}/{ref}"
        return await self._client.standard_request(path)
