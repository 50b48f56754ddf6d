"""Activity events: public, repository, organization, and user event feeds."""

from typing import Any, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url

PAGE_PARAMS = ("page",)


class EventsApi(ApiResource):
    """Read-only event feeds. Every listing accepts ``{"page": n}``."""

    async def get_events(self, params: Optional[Params] = None) -> Any:
        """List public events."""
        return await self._client.standard_request(build_url("/events", params, PAGE_PARAMS))

    async def get_repository_events(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """List repository events."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/events", params, PAGE_PARAMS)
        )

    async def get_repository_issue_events(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """
        List issue events for a repository.

        Repository issue events have a different format than other events,
        as documented in the Issue Events API.
        """
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/issues/events", params, PAGE_PARAMS)
        )

    async def get_network_repository_events(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """List public events for a network of repositories."""
        return await self._client.standard_request(
            build_url(f"/networks/{owner}/{repo}/events", params, PAGE_PARAMS)
        )

    async def get_organization_events(self, org: str, params: Optional[Params] = None) -> Any:
        """List public events for an organization."""
        return await self._client.standard_request(
            build_url(f"/orgs/{org}/events", params, PAGE_PARAMS)
        )

    async def get_user_events_received(self, username: str, params: Optional[Params] = None) -> Any:
        """
        List events that a user has received.

        These come from watched repositories and followed users. When
        authenticated as that user, private events are included.
        """
        return await self._client.standard_request(
            build_url(f"/users/{username}/received_events", params, PAGE_PARAMS)
        )

    async def get_user_public_events_received(self, username: str, params: Optional[Params] = None) -> Any:
        """List public events that a user has received."""
        return await self._client.standard_request(
            build_url(f"/users/{username}/received_events/public", params, PAGE_PARAMS)
        )

    async def get_user_events(self, username: str, params: Optional[Params] = None) -> Any:
        """List events performed by a user."""
        return await self._client.standard_request(
            build_url(f"/users/{username}/events", params, PAGE_PARAMS)
        )

    async def get_user_public_events(self, username: str, params: Optional[Params] = None) -> Any:
        """List public events performed by a user."""
        return await self._client.standard_request(
            build_url(f"/users/{username}/events/public", params, PAGE_PARAMS)
        )

    async def get_user_organization_events(
        self,
        username: str,
        org: str,
        params: Optional[Params] = None
    ) -> Any:
        """
        List events for an organization.

        This is the user's organization dashboard; you must be authenticated
        as the user to view it.
        """
        return await self._client.standard_request(
            build_url(f"/users/{username}/events/orgs/{org}", params, PAGE_PARAMS)
        )
