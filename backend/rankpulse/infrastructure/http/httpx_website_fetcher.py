"""httpx-based website fetcher — implements the WebsiteFetcher interface."""

import logging

import httpx

from rankpulse.application.interfaces import WebsiteFetcher
from rankpulse.domain.exceptions import MetadataFetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; RankPulse/1.0; +https://rankpulse.com)"


class HttpxWebsiteFetcher(WebsiteFetcher):
    """Fetches pages server-side with a fixed RankPulse user agent.

    An ``http_client`` can be injected (tests pass one backed by
    ``httpx.MockTransport``); otherwise a short-lived client is created per call.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._user_agent = user_agent
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def fetch_html(self, url: str) -> str:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(url, headers={"User-Agent": self._user_agent})
        except httpx.HTTPError as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            raise MetadataFetchError(url, message=str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            logger.warning("Fetching %s returned HTTP %d", url, response.status_code)
            raise MetadataFetchError(url, status_code=response.status_code)

        return response.text
