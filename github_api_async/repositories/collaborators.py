"""Repository collaborators."""

from typing import Any, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url


class CollaboratorsApi(ApiResource):
    """Collaborator endpoints.

    For organization-owned repositories the collaborator list includes
    outside collaborators, team members, members with default organization
    permissions, and organization owners.
    """

    async def get_collaborators(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """
        List collaborators.

        Args:
            owner: Repository owner
            repo: Repository name
            params: Optional ``affiliation`` (outside, direct, all) and ``page``

        Returns:
            List of users
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/collaborators", params, ("affiliation", "page"))
        )

    async def get_user_is_collaborator(self, owner: str, repo: str, username: str) -> Any:
        """Check collaborator status: resolves on 204, raises HttpError(404) otherwise."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/collaborators/{username}")

    async def get_user_permission_level(self, owner: str, repo: str, username: str) -> Any:
        """Review a user's permission level: admin, write, read, or none."""
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/collaborators/{username}/permission"
        )

    async def put_user_collaborator(
        self,
        owner: str,
        repo: str,
        username: str,
        params: Optional[Params] = None
    ) -> Any:
        """
        Add a user as a collaborator.

        GitHub answers 201 with an invitation or 204 when the user already
        has access. Invitations are limited to 50 per repository per day.

        Args:
            owner: Repository owner
            repo: Repository name
            username: User to add
            params: Optional ``permission`` (pull, push, admin), only valid on
                organization-owned repositories

        Returns:
            The invitation, or None on 204
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/collaborators/{username}", params, ("permission",)),
            "put"
        )

    async def delete_user_collaborator(self, owner: str, repo: str, username: str) -> Any:
        """Remove a user as a collaborator."""
        return await self._client.standard_request(
            f"/repos/{owner}/{repo}/collaborators/{username}", "delete"
        )
