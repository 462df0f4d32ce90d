"""Abstract website fetcher interface — downloads raw HTML for metadata extraction."""

from abc import ABC, abstractmethod


class WebsiteFetcher(ABC):
    """Port for fetching a web page's HTML."""

    @abstractmethod
    async def fetch_html(self, url: str) -> str:
        """Return the page body.

        Raises:
            MetadataFetchError: If the page cannot be fetched or the server
                answers with a non-success status.
        """
        ...
