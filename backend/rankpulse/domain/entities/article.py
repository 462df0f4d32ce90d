"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ArticleStatus(str, Enum):
    """Publishing state of an article. Stored verbatim, never reinterpreted."""

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


@dataclass
class Article:
    """Core domain entity representing an SEO article owned by a project."""

    project_id: str
    title: str
    content: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    meta_description: str | None = None
    word_count: int | None = None
    language: str = "en"
    status: ArticleStatus = ArticleStatus.DRAFT
    scheduled_at: datetime | None = None
    published_at: datetime | None = None
    cms_post_id: str | None = None
    published_url: str | None = None
    featured_image_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_featured_image(self) -> bool:
        return bool(self.featured_image_url)
