"""Website metadata extraction — fills in a project's business details from its homepage."""

import logging
import re
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from rankpulse.application.interfaces import WebsiteFetcher
from rankpulse.domain.entities import WebsiteMetadata
from rankpulse.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_CONTENT_LIMIT = 2000

_HIDDEN_TAGS = ("script", "style", "noscript")
_CONTENT_LANGUAGE = re.compile(r"^content-language$", re.IGNORECASE)

Markup = str | BeautifulSoup


def _soup(markup: Markup) -> BeautifulSoup:
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup or "", "html.parser")


def _meta_content(soup: BeautifulSoup, **attrs: str | re.Pattern) -> str | None:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = (tag.get("content") or "").strip()
    return content or None


def normalize_url(url: str) -> str:
    """Prefix ``https://`` when the URL has no http(s) scheme."""
    url = url.strip()
    return url if url.startswith("http") else f"https://{url}"


def extract_title(markup: Markup) -> str | None:
    soup = _soup(markup)
    if soup.title is not None:
        title = soup.title.get_text(strip=True)
        if title:
            return title
    return _meta_content(soup, property="og:title")


def extract_description(markup: Markup) -> str | None:
    soup = _soup(markup)
    return _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )


def extract_language(markup: Markup) -> str:
    """Primary language subtag, e.g. ``en-US`` → ``en``; defaults to English."""
    soup = _soup(markup)
    lang = soup.html.get("lang") if soup.html is not None else None
    if not lang:
        lang = _meta_content(soup, **{"http-equiv": _CONTENT_LANGUAGE})
    if not lang or not lang.strip():
        return DEFAULT_LANGUAGE
    return lang.strip().split("-")[0].lower()


def extract_favicon(markup: Markup, base_url: str) -> str | None:
    """Icon link resolved against ``base_url``; ``/favicon.ico`` at the origin otherwise."""
    soup = _soup(markup)
    link = soup.select_one("link[rel~=icon][href]")
    if link is not None and link["href"].strip():
        return urljoin(base_url, link["href"].strip())

    parsed = urlparse(base_url)
    if not (parsed.scheme and parsed.netloc):
        return None
    return f"{parsed.scheme}://{parsed.netloc}/favicon.ico"


def extract_main_content(markup: Markup, limit: int = DEFAULT_CONTENT_LIMIT) -> str:
    """Visible body text with whitespace collapsed. Removes hidden tags from ``markup``."""
    soup = _soup(markup)
    for tag in soup.find_all(_HIDDEN_TAGS):
        tag.decompose()

    root = soup.body if soup.body is not None else soup
    text = " ".join(root.get_text(" ", strip=True).split())
    return text[:limit]


def parse_metadata(html: str, url: str, content_limit: int = DEFAULT_CONTENT_LIMIT) -> WebsiteMetadata:
    soup = _soup(html)
    return WebsiteMetadata(
        title=extract_title(soup),
        description=extract_description(soup),
        language=extract_language(soup),
        favicon=extract_favicon(soup, url),
        # Last: strips hidden tags from the shared tree.
        content=extract_main_content(soup, content_limit),
    )


class WebsiteMetadataService:
    """Fetches a website and extracts the metadata used to auto-fill a project."""

    def __init__(self, fetcher: WebsiteFetcher, content_limit: int = DEFAULT_CONTENT_LIMIT):
        self._fetcher = fetcher
        self._content_limit = content_limit

    async def extract(self, url: str | None) -> WebsiteMetadata:
        if url is None or not url.strip():
            raise ValidationError("URL is required")

        normalized = normalize_url(url)
        html = await self._fetcher.fetch_html(normalized)
        metadata = parse_metadata(html, normalized, self._content_limit)
        logger.info(
            "Extracted metadata from %s (title=%r, language=%s)",
            normalized,
            metadata.title,
            metadata.language,
        )
        return metadata
