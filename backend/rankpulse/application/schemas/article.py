"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from rankpulse.domain.entities import ArticleStatus


class ArticleCreate(BaseModel):
    """Schema for one candidate article in a bulk insert."""

    project_id: str = Field(..., min_length=1, max_length=36)
    title: str = Field(..., min_length=1, max_length=500, examples=["how to make a landing page"])
    content: str = ""
    meta_description: str | None = None
    word_count: int | None = Field(None, ge=0)
    language: str = Field("en", max_length=10)
    status: ArticleStatus = ArticleStatus.DRAFT
    scheduled_at: datetime | None = None
    featured_image_url: str | None = None


class ArticleBulkCreate(BaseModel):
    """Request body for ``POST /articles``.

    An absent or empty ``articles`` list is reported by the service as a
    400, not a 422.
    """

    articles: list[ArticleCreate] | None = None
    capitalize_titles: bool = False


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    project_id: str
    title: str
    content: str
    meta_description: str | None
    word_count: int | None
    language: str
    status: ArticleStatus
    scheduled_at: datetime | None
    published_at: datetime | None
    cms_post_id: str | None
    published_url: str | None
    featured_image_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleBulkCreateResponse(BaseModel):
    success: bool = True
    articles: list[ArticleResponse]


class ArticleRangeDeleteResponse(BaseModel):
    success: bool = True
    deleted: int


class LatestArticleSummary(BaseModel):
    """Subset of columns used when checking the latest article."""

    id: str
    title: str
    featured_image_url: str | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ArticleColumnsResponse(BaseModel):
    """Latest article together with its raw row and column names."""

    success: bool = True
    article: LatestArticleSummary
    raw_data: dict[str, Any]
    columns: list[str]


class FeaturedImageResponse(BaseModel):
    success: bool = True
    article: LatestArticleSummary
    has_featured_image: bool
