"""Releases and release assets for the configured default repository.

These calls are scoped by ``config.owner`` and ``config.repo`` rather than by
arguments.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..github.client import ApiResource
from ..github.query_builder import assemble_query_params
from ..utils.errors import ValidationError


logger = logging.getLogger(__name__)

UPLOAD_URL_TEMPLATE = "{?name,label}"


class ReleasesApi(ApiResource):
    """Release endpoints for the repository named in the client config."""

    def _repo_url(self, additional_path: str = "") -> str:
        owner, repo = self.config.owner, self.config.repo
        if not owner or not repo:
            raise ValidationError(
                "Release calls need config.owner and config.repo to be set",
                field="repo"
            )
        url = f"/repos/{owner}/{repo}/"
        if additional_path:
            url += additional_path
        return url

    async def get_releases(self) -> Any:
        """
        List releases.

        Plain Git tags without a release are not included. Draft releases are
        only listed for users with push access.
        """
        return await self._client.standard_request(self._repo_url("releases"))

    async def get_release(self, release_id: int) -> Any:
        """Get a single release."""
        return await self._client.standard_request(self._repo_url(f"releases/{release_id}"))

    async def get_latest_release(self) -> Any:
        """Get the latest published full release; drafts and prereleases are skipped."""
        return await self._client.standard_request(self._repo_url("releases/latest"))

    async def get_release_by_tag_name(self, tag: str) -> Any:
        """Get a published release by tag; raises HttpError(404) if no release uses the tag."""
        return await self._client.standard_request(self._repo_url(f"releases/tags/{tag}"))

    async def create_release(self, body: Dict[str, Any]) -> Any:
        """
        Create a release. Requires push access.

        Args:
            body: ``tag_name`` is required; ``target_commitish``, ``name``,
                ``body``, ``draft`` and ``prerelease`` are optional

        Returns:
            The created release; GitHub answers 422 for invalid values
        """
        return await self._client.standard_request(self._repo_url("releases"), "post", body)

    async def update_release(self, release_id: int, body: Dict[str, Any]) -> Any:
        return await self._client.standard_request(
            self._repo_url(f"releases/{release_id}"), "patch", body
        )

    async def delete_release(self, release_id: int) -> Any:
        return await self._client.standard_request(self._repo_url(f"releases/{release_id}"), "delete")

    async def get_release_assets(self, release_id: int) -> Any:
        """List assets for a release."""
        return await self._client.standard_request(self._repo_url(f"releases/{release_id}/assets"))

    async def upload_release_asset(
        self,
        upload_url: str,
        asset_name: str,
        asset_label: str,
        local_file_path: str,
        content_type: str
    ) -> Any:
        """
        Upload a local file as a release asset.

        Args:
            upload_url: The release's ``upload_url``; a trailing
                ``{?name,label}`` template is stripped
            asset_name: File name shown on the release
            asset_label: Short description shown instead of the name
            local_file_path: Path of the file to upload
            content_type: Media type of the file, e.g. ``application/zip``

        Returns:
            The asset object. GitHub answers 422 for a duplicate name.

        Raises:
            OSError: If the local file cannot be read
        """
        if upload_url.endswith(UPLOAD_URL_TEMPLATE):
            upload_url = upload_url[:-len(UPLOAD_URL_TEMPLATE)]

        query = assemble_query_params(
            {"name": asset_name, "label": asset_label},
            ["name", "label"]
        )
        if query:
            upload_url = f"{upload_url}?{query}"

        data = Path(local_file_path).read_bytes()
        logger.info(f"Uploading {asset_name} ({len(data)} bytes) as {content_type}")

        return await self._client.standard_request(
            upload_url,
            "post",
            data,
            headers={"Content-Type": content_type}
        )

    async def get_release_asset(self, asset_id: int) -> Any:
        """Get a single release asset; download it from its ``browser_download_url``."""
        return await self._client.standard_request(self._repo_url(f"releases/assets/{asset_id}"))

    async def update_release_asset(self, asset_id: int, body: Dict[str, Any]) -> Any:
        """Edit an asset's ``name`` or ``label``."""
        return await self._client.standard_request(
            self._repo_url(f"releases/assets/{asset_id}"), "patch", body
        )

    async def delete_release_asset(self, asset_id: int) -> Any:
        return await self._client.standard_request(
            self._repo_url(f"releases/assets/{asset_id}"), "delete"
        )
