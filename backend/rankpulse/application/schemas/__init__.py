from .article import (
    ArticleCreate,
    ArticleBulkCreate,
    ArticleResponse,
    ArticleBulkCreateResponse,
    ArticleRangeDeleteResponse,
    LatestArticleSummary,
    ArticleColumnsResponse,
    FeaturedImageResponse,
)
from .metadata import (
    MetadataExtractRequest,
    WebsiteMetadataSchema,
    MetadataExtractResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleBulkCreate",
    "ArticleResponse",
    "ArticleBulkCreateResponse",
    "ArticleRangeDeleteResponse",
    "LatestArticleSummary",
    "ArticleColumnsResponse",
    "FeaturedImageResponse",
    "MetadataExtractRequest",
    "WebsiteMetadataSchema",
    "MetadataExtractResponse",
]
