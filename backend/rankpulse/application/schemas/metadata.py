"""Pydantic DTOs for website metadata extraction."""

from pydantic import BaseModel


class MetadataExtractRequest(BaseModel):
    """``url`` may omit the scheme; ``https://`` is assumed."""

    url: str | None = None


class WebsiteMetadataSchema(BaseModel):
    title: str | None
    description: str | None
    language: str | None
    favicon: str | None
    content: str

    model_config = {"from_attributes": True}


class MetadataExtractResponse(BaseModel):
    success: bool = True
    metadata: WebsiteMetadataSchema
