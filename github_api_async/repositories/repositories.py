"""Repository listings."""

from typing import Any, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url

MY_REPOS_PARAMS = ("visibility", "affiliation", "type", "sort", "direction", "page")
USER_REPOS_PARAMS = ("type", "sort", "direction", "page")
ORG_REPOS_PARAMS = ("type", "page")


class RepositoriesApi(ApiResource):

    async def get_my_repos(self, params: Optional[Params] = None) -> Any:
        """
        List repositories accessible to the authenticated user.

        Includes owned repositories, repositories where the user is a
        collaborator, and those reachable through organization membership.

        Args:
            params: Optional ``visibility``, ``affiliation``, ``type``,
                ``sort``, ``direction`` and ``page``

        Returns:
            List of repositories
        """
        return await self._client.standard_request(build_url("/user/repos", params, MY_REPOS_PARAMS))

    async def get_user_repos(self, username: str, params: Optional[Params] = None) -> Any:
        """List public repositories for a user."""
        return await self._client.standard_request(
            build_url(f"/users/{username}/repos", params, USER_REPOS_PARAMS)
        )

    async def get_org_repos(self, org: str, params: Optional[Params] = None) -> Any:
        """List repositories for an organization."""
        return await self._client.standard_request(
            build_url(f"/orgs/{org}/repos", params, ORG_REPOS_PARAMS)
        )
