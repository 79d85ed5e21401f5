from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from app.config import Settings
from app.services.errors import ExternalServiceError, NetworkError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search/repositories"
ACCEPT_MEDIA_TYPE = "application/vnd.github+json"
USER_AGENT = "github-repository-finder/0.1"


class GitHubSearchClient:
    """Thin synchronous wrapper around the repository search endpoint.

    One page, no retry, no rate-limit handling. Failures surface as
    ``ExternalServiceError`` (GitHub answered badly) or ``NetworkError``
    (GitHub was never reached).
    """

    def __init__(
        self,
        *,
        base_url: str = "https://api.github.com",
        token: str | None = None,
        api_version: str = "2022-11-28",
        timeout: float = 20,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": ACCEPT_MEDIA_TYPE,
            "X-GitHub-Api-Version": api_version,
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.Client(base_url=base_url, headers=headers, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, *, transport: httpx.BaseTransport | None = None) -> GitHubSearchClient:
        return cls(
            base_url=settings.github_api_base_url,
            token=settings.github_api_token.strip() or None,
            api_version=settings.github_api_version,
            timeout=settings.github_timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def search(self, built_query: str, sort: str, order: str = "desc", per_page: int = 30) -> list[dict[str, Any]]:
        # '+' separators in the built query must reach GitHub unescaped.
        query_string = urlencode({"q": built_query, "sort": sort, "order": order, "per_page": per_page}, safe="+:")
        url = f"{SEARCH_PATH}?{query_string}"
        logger.info("GitHub search request: %s", url)

        try:
            response = self.client.get(url)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Timed out contacting GitHub API: {exc}") from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"Unable to connect to GitHub API: {type(exc).__name__} {exc}") from exc
        except httpx.RequestError as exc:
            raise ExternalServiceError(f"GitHub API request failed: {type(exc).__name__} {exc}") from exc

        logger.info("GitHub search response status: %s", response.status_code)
        if not response.is_success:
            # Redirects are not followed; a 3xx is reported as a bad gateway.
            raise ExternalServiceError(
                f"GitHub {response.status_code}: {response.text[:500]}",
                status_code=response.status_code if response.is_error else 502,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ExternalServiceError("GitHub API returned a body that is not JSON") from exc

        if not isinstance(payload, dict):
            logger.warning("Unexpected GitHub search payload type: %s", type(payload).__name__)
            return []
        items = payload.get("items")
        if not isinstance(items, list):
            return []
        return items
