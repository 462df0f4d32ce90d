"""Domain entity for metadata scraped from a project's website."""

from dataclasses import dataclass


@dataclass
class WebsiteMetadata:
    """Fields used to auto-fill a project's business details."""

    title: str | None = None
    description: str | None = None
    language: str | None = None
    favicon: str | None = None
    content: str = ""
