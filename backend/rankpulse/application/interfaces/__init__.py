from .article_repository import ArticleRepository
from .website_fetcher import WebsiteFetcher

__all__ = [
    "ArticleRepository",
    "WebsiteFetcher",
]
