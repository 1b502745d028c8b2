"""Fetching and caching of dev.to articles."""

from dtdrafts.articles.cache import ArticleCache, CacheError
from dtdrafts.articles.client import ArticleFetchError, DevToClient
from dtdrafts.articles.models import Article, ArticleUser
from dtdrafts.articles.service import ArticleService, RefreshEstimate, fetch_articles

__all__ = [
    "Article",
    "ArticleCache",
    "ArticleFetchError",
    "ArticleService",
    "ArticleUser",
    "CacheError",
    "DevToClient",
    "RefreshEstimate",
    "fetch_articles",
]
