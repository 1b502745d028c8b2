"""Cache-or-network policy for obtaining the user's articles."""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from dtdrafts.articles.cache import ArticleCache
from dtdrafts.articles.client import DevToClient, PageCallback
from dtdrafts.articles.models import Article
from dtdrafts.config.fetch import FetchConfig


@dataclass(frozen=True)
class RefreshEstimate:
    """Rough cost of re-downloading a cache of ``cached_count`` articles."""

    cached_count: int
    pages: int
    seconds: int


class ArticleService:
    """Serve articles from the local cache, falling back to the dev.to API."""

    def __init__(
        self,
        api_key: str,
        *,
        cache: ArticleCache | None = None,
        config: FetchConfig | None = None,
    ):
        self.api_key = api_key
        self.cache = cache or ArticleCache()
        self.config = config or FetchConfig()

    def fetch(self, force_refresh: bool = False, on_page: PageCallback | None = None) -> list[Article]:
        """Return cached articles when a cache exists, otherwise download them.

        A cache is used as-is whenever the file is present; ``force_refresh``
        always goes to the network. The cache is only rewritten after every
        page has been fetched successfully.
        """
        if not force_refresh and self.cache.exists():
            logger.debug("Using cached articles from {}", self.cache.path)
            return self.cache.load()

        logger.info("Fetching articles from {}", self.config.base_url)
        with DevToClient(self.api_key, self.config) as client:
            articles = client.fetch_all(on_page=on_page)
        self.cache.save(articles)
        return articles

    def estimate_refresh(self) -> RefreshEstimate | None:
        """Estimate pages and seconds a refresh takes, or ``None`` without a cache."""
        count = self.cache.count()
        if count == 0:
            return None
        pages = math.ceil(count / self.config.page_size)
        seconds = max(pages, math.ceil(pages * self.config.request_delay))
        return RefreshEstimate(cached_count=count, pages=pages, seconds=seconds)


def fetch_articles(
    api_key: str,
    force_refresh: bool = False,
    *,
    cache: ArticleCache | None = None,
    config: FetchConfig | None = None,
    on_page: PageCallback | None = None,
) -> list[Article]:
    """Convenience wrapper around :meth:`ArticleService.fetch`."""

    service = ArticleService(api_key, cache=cache, config=config)
    return service.fetch(force_refresh=force_refresh, on_page=on_page)


__all__ = ["ArticleService", "RefreshEstimate", "fetch_articles"]
