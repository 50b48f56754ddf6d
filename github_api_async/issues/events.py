"""Issue events."""

from typing import Any, Optional

from ..github.client import ApiResource
from ..github.query_builder import Params, build_url


class IssueEventsApi(ApiResource):

    async def get_issue_events(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        params: Optional[Params] = None
    ) -> Any:
        """List events for an issue."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/issues/{issue_number}/events", params, ("page",))
        )

    async def get_repository_issue_events(self, owner: str, repo: str, params: Optional[Params] = None) -> Any:
        """List issue events for a repository."""
        return await self._client.standard_request(
            build_url(f"/repos/{owner}/{repo}/issues/events", params, ("page",))
        )

    async def get_event(self, owner: str, repo: str, event_id: int) -> Any:
        """Get a single event."""
        return await self._client.standard_request(f"/repos/{owner}/{repo}/issues/events/{event_id}")
