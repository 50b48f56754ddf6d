"""Teams.

Only available to authenticated members of the team's organization. OAuth
tokens need the ``read:org`` scope.
"""

from typing import Any, Dict, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url


class TeamsApi(ApiResource):
    """Team endpoints, addressed by organization id and team id."""

    @staticmethod
    def _team_path(org_id: int, team_id: int) -> str:
        return f"/organizations/{org_id}/team/{team_id}"

    async def get_teams(self, org: str, params: Optional[Params] = None) -> Any:
        """List teams in an organization."""
        return await self._client.standard_request(build_url(f"/orgs/{org}/teams", params, ("page",)))

    async def get_team(self, team_id: int, org_id: int) -> Any:
        return await self._client.standard_request(self._team_path(org_id, team_id))

    async def create_team(self, org: str, body: Dict[str, Any]) -> Any:
        """
        Create a team. The authenticated user must be a member of ``org``.

        Args:
            org: Organization login
            body: ``name`` is required; ``description``, ``maintainers``,
                ``repo_names``, ``privacy`` (secret, closed),
                ``permission`` (pull, push, admin) and ``parent_team_id``
                are optional

        Returns:
            The created team
        """
        return await self._client.standard_request(f"/orgs/{org}/teams", "post", body)

    async def edit_team(self, team_id: int, org_id: int, body: Dict[str, Any]) -> Any:
        """Edit a team. Requires organization ownership or team maintainership."""
        return await self._client.standard_request(self._team_path(org_id, team_id), "patch", body)

    async def delete_team(self, team_id: int, org_id: int) -> Any:
        """Delete a team. Deleting a parent team also deletes its child teams."""
        return await self._client.standard_request(self._team_path(org_id, team_id), "delete")

    async def get_child_teams(self, team_id: int, org_id: int, params: Optional[Params] = None) -> Any:
        return await self._client.standard_request(
            build_url(f"{self._team_path(org_id, team_id)}/teams", params, ("page",))
        )

    async def get_team_repos(self, team_id: int, org_id: int, params: Optional[Params] = None) -> Any:
        return await self._client.standard_request(
            build_url(f"{self._team_path(org_id, team_id)}/repos", params, ("page",))
        )

    async def get_is_repo_managed_by_team(self, team_id: int, org_id: int, owner: str, repo: str) -> Any:
        """Check whether a team manages a repository; raises HttpError(404) if not."""
        return await self._client.standard_request(
            f"{self._team_path(org_id, team_id)}/repos/{owner}/{repo}"
        )

    async def update_team_repository(
        self,
        team_id: int,
        org_id: int,
        owner: str,
        repo: str,
        body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Add a repository to a team or update the team's permission on it.

        Args:
            team_id: Team id
            org_id: Organization id
            owner: Repository owner
            repo: Repository name
            body: Optional ``permission`` (pull, push, admin); the team's own
                permission applies when omitted

        Returns:
            None (GitHub answers 204)
        """
        return await self._client.standard_request(
            f"{self._team_path(org_id, team_id)}/repos/{owner}/{repo}", "put", body
        )

    async def remove_team_repository(self, team_id: int, org_id: int, owner: str, repo: str) -> Any:
        """Remove a repository from a team. The repository itself is not deleted."""
        return await self._client.standard_request(
            f"{self._team_path(org_id, team_id)}/repos/{owner}/{repo}", "delete"
        )

    async def get_user_teams(self, params: Optional[Params] = None) -> Any:
        """List teams across all organizations the authenticated user belongs to."""
        return await self._client.standard_request(build_url("/user/teams", params, ("page",)))

    async def get_team_projects(self, team_id: int, org_id: int, params: Optional[Params] = None) -> Any:
        return await self._client.standard_request(
            build_url(f"{self._team_path(org_id, team_id)}/projects", params, ("page",))
        )

    async def get_team_project(self, team_id: int, org_id: int, project_id: int) -> Any:
        """Review a team's permission (read, write, admin) on an organization project."""
        return await self._client.standard_request(
            f"{self._team_path(org_id, team_id)}/projects/{project_id}"
        )

    async def update_team_project(
        self,
        team_id: int,
        org_id: int,
        project_id: int,
        body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Add an organization project to a team or change its ``permission``."""
        return await self._client.standard_request(
            f"{self._team_path(org_id, team_id)}/projects/{project_id}", "put", body
        )

    async def remove_team_project(self, team_id: int, org_id: int, project_id: int) -> Any:
        """Remove a project from a team without deleting it."""
        return await self._client.standard_request(
            f"{self._team_path(org_id, team_id)}/projects/{project_id}", "delete"
        )
