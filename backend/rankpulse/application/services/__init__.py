from .article_service import ArticleService
from .range_scoped_mutator import RangeScopedMutator
from .website_metadata_service import WebsiteMetadataService

__all__ = [
    "ArticleService",
    "RangeScopedMutator",
    "WebsiteMetadataService",
]
