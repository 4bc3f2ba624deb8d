"""Image Search Client - wraps the Unsplash search endpoint behind one async call.

Invariants:
    - Results normalized to {imageUrl, description, altDescription} (small rendition URL)
    - Missing access key -> ConfigurationError before any network call
    - Transport errors, non-2xx responses and non-JSON bodies -> UpstreamAPIError
    - No retries: one request per call

Design Decisions:
    - httpx.AsyncClient with injectable transport: tests swap in httpx.MockTransport
"""

import logging
from typing import Any

import httpx

from mediashelf.core.errors import ConfigurationError, UpstreamAPIError

logger = logging.getLogger(__name__)

PROVIDER = "unsplash"
SEARCH_FAILED = "Failed to fetch images from Unsplash."


def normalize_photo(result: dict[str, Any]) -> dict:
    urls = result.get("urls") or {}
    return {
        "imageUrl": urls.get("small"),
        "description": result.get("description"),
        "altDescription": result.get("alt_description"),
    }


class UnsplashClient:
    """Async client for the image search provider."""

    def __init__(
        self,
        access_key: str,
        base_url: str = "https://api.unsplash.com",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_key = access_key
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    def _auth_headers(self) -> dict[str, str]:
        if not self.access_key:
            raise ConfigurationError(
                "Unsplash API key is missing. Please configure the .env file.",
            )
        return {"Authorization": f"Client-ID {self.access_key}"}

    async def search_photos(self, query: str) -> list[dict]:
        headers = self._auth_headers()
        try:
            response = await self._client.get(
                "/search/photos", params={"query": query}, headers=headers,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Unsplash search returned {e.response.status_code}",
                extra={"provider": PROVIDER, "status_code": e.response.status_code},
            )
            raise UpstreamAPIError(
                SEARCH_FAILED, PROVIDER, details=f"HTTP {e.response.status_code}",
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Unsplash search failed: {e}", extra={"provider": PROVIDER})
            raise UpstreamAPIError(SEARCH_FAILED, PROVIDER, details=str(e))

        return [normalize_photo(r) for r in (data.get("results") or [])]

    async def aclose(self) -> None:
        await self._client.aclose()
