"""HTTPX-based implementation of the ReleaseListingPort.

This adapter asks the GitHub releases API which Electron versions exist.
"""

from __future__ import annotations

import httpx

from electron_installer.adapters.ports import ReleaseListingPort
from electron_installer.domain.exceptions import TransportError

ELECTRON_RELEASES_URL = (
    "https://api.github.com/repos/electron/electron/releases?per_page=100"
)


class HttpxReleaseListing:
    """HTTPX-based adapter for listing Electron releases.

    Fetches the release listing once per call and returns each
    release's tag name without its 'v' prefix. Caching is the caller's
    concern (see KnownVersionsCache).
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        url: str = ELECTRON_RELEASES_URL,
    ) -> None:
        """Initialize the release listing adapter.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
            url: Release listing endpoint.
        """
        self._client = client
        self._url = url

    def fetch_tags(self) -> list[str]:
        """Fetch release tags from the listing endpoint.

        Returns:
            Version strings such as '1.6.2', in the order the API returned them.

        Raises:
            TransportError: For network failures, HTTP errors, or a payload
                that is not a JSON array.
        """
        try:
            if self._client is not None:
                payload = self._get(self._client)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    payload = self._get(client)
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Release listing failed: {e}",
                url=self._url,
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"Release listing failed: {e}", url=self._url) from e
        except ValueError as e:
            raise TransportError(
                f"Release listing returned invalid JSON: {e}", url=self._url
            ) from e

        if not isinstance(payload, list):
            raise TransportError(
                "Release listing did not return a JSON array", url=self._url
            )

        tags: list[str] = []
        for release in payload:
            if not isinstance(release, dict):
                continue
            tag = release.get("tag_name")
            if isinstance(tag, str) and tag:
                tags.append(tag[1:] if tag.startswith("v") else tag)
        return tags

    def _get(self, client: httpx.Client) -> object:
        response = client.get(self._url, headers={"Accept": "application/vnd.github+json"})
        response.raise_for_status()
        return response.json()


# Runtime protocol check
assert isinstance(HttpxReleaseListing(), ReleaseListingPort)
