"""dev.to API client that pages through the authenticated user's drafts."""

from __future__ import annotations

import time
from typing import Any, Callable

import requests
from loguru import logger
from pydantic import ValidationError

from dtdrafts.articles.models import Article
from dtdrafts.config.fetch import FetchConfig

UNPUBLISHED_PATH = "/articles/me/unpublished"

PageCallback = Callable[[int, int], None]


class ArticleFetchError(RuntimeError):
    """Raised when a page cannot be downloaded or decoded."""


class DevToClient:
    """Client for the ``/articles/me/unpublished`` endpoint."""

    def __init__(self, api_key: str, config: FetchConfig | None = None):
        self.config = config or FetchConfig()
        self.endpoint = self.config.base_url.rstrip("/") + UNPUBLISHED_PATH
        self.session = requests.Session()
        self.session.headers.update(
            {
                "api-key": api_key,
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
            }
        )

    def __enter__(self) -> DevToClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch_all(self, on_page: PageCallback | None = None) -> list[Article]:
        """
        Download every draft, one page at a time.

        Pages are requested in order until one comes back shorter than
        ``page_size``. The client sleeps ``request_delay`` seconds between
        requests to stay under the API rate limit.

        Args:
            on_page: Optional callback receiving ``(page_number, total_so_far)``
                after each page.

        Returns:
            All articles across every page, in API order.

        Raises:
            ArticleFetchError: on the first page that fails; nothing is returned.
        """
        articles: list[Article] = []
        page = 1

        while True:
            batch = self.fetch_page(page)
            articles.extend(batch)
            logger.debug("Page {}: fetched {} articles so far", page, len(articles))
            if on_page is not None:
                on_page(page, len(articles))

            if len(batch) < self.config.page_size:
                break

            page += 1
            time.sleep(self.config.request_delay)

        logger.info("Done: {} articles fetched in {} page(s)", len(articles), page)
        return articles

    def fetch_page(self, page: int) -> list[Article]:
        """Fetch and validate a single page of drafts."""
        params = {"page": page, "per_page": self.config.page_size}
        logger.debug("GET {} params={}", self.endpoint, params)

        try:
            response = self.session.get(self.endpoint, params=params, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise ArticleFetchError(f"Failed to fetch articles from dev.to API: {exc}") from exc

        if not response.ok:
            raise ArticleFetchError(
                f"API request failed with status: {response.status_code}. Please check your API key."
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise ArticleFetchError(f"Failed to parse JSON response for page {page}: {exc}") from exc

        return self._parse_page(payload, page)

    def _parse_page(self, payload: Any, page: int) -> list[Article]:
        if not isinstance(payload, list):
            raise ArticleFetchError(
                f"Unexpected response for page {page}: expected a JSON array, got {type(payload).__name__}"
            )
        try:
            return [Article.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise ArticleFetchError(f"Malformed article in page {page}: {exc}") from exc


__all__ = ["ArticleFetchError", "DevToClient", "PageCallback"]
