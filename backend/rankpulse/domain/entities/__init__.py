from .article import Article, ArticleStatus
from .date_range import ScopedDateRange, month_range, scoped_month_range
from .website_metadata import WebsiteMetadata

__all__ = [
    "Article",
    "ArticleStatus",
    "ScopedDateRange",
    "month_range",
    "scoped_month_range",
    "WebsiteMetadata",
]
