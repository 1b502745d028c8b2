"""Tests for the cache-or-network article policy."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from dtdrafts.articles.cache import ArticleCache
from dtdrafts.articles.client import ArticleFetchError
from dtdrafts.articles.models import Article
from dtdrafts.articles.service import ArticleService, RefreshEstimate, fetch_articles
from dtdrafts.config.fetch import FetchConfig
from tests.utils import json_response, make_article, page_of

FAST = FetchConfig(page_size=2, request_delay=0)


@pytest.fixture
def service() -> ArticleService:
    return ArticleService("key", config=FAST)


@patch("dtdrafts.articles.client.requests.Session.get")
def test_existing_cache_short_circuits_network(
    mock_get: Mock, service: ArticleService, sample_articles: list[Article]
) -> None:
    service.cache.save(sample_articles)

    articles = service.fetch()

    assert articles == sample_articles
    mock_get.assert_not_called()


@patch("dtdrafts.articles.client.requests.Session.get")
def test_empty_cache_file_is_still_used(mock_get: Mock, service: ArticleService) -> None:
    service.cache.save([])

    assert service.fetch() == []
    mock_get.assert_not_called()


@patch("dtdrafts.articles.client.time.sleep")
@patch("dtdrafts.articles.client.requests.Session.get")
def test_missing_cache_fetches_and_persists(mock_get: Mock, mock_sleep: Mock, service: ArticleService) -> None:
    mock_get.side_effect = [json_response(page_of(1, 2)), json_response(page_of(3, 1))]

    articles = service.fetch()

    assert len(articles) == 3
    assert mock_get.call_count == 2
    assert service.cache.load() == articles


@patch("dtdrafts.articles.client.time.sleep")
@patch("dtdrafts.articles.client.requests.Session.get")
def test_force_refresh_bypasses_cache(
    mock_get: Mock, mock_sleep: Mock, service: ArticleService, sample_articles: list[Article]
) -> None:
    service.cache.save(sample_articles)
    mock_get.return_value = json_response(page_of(10, 1))

    articles = service.fetch(force_refresh=True)

    assert [article.id for article in articles] == [10]
    mock_get.assert_called_once()
    assert [article.id for article in service.cache.load()] == [10]


@patch("dtdrafts.articles.client.time.sleep")
@patch("dtdrafts.articles.client.requests.Session.get")
def test_failed_refresh_keeps_previous_cache(
    mock_get: Mock, mock_sleep: Mock, service: ArticleService, sample_articles: list[Article]
) -> None:
    service.cache.save(sample_articles)
    mock_get.side_effect = [json_response(page_of(1, 2)), json_response([], status_code=500)]

    with pytest.raises(ArticleFetchError):
        service.fetch(force_refresh=True)

    assert service.cache.load() == sample_articles


@patch("dtdrafts.articles.client.requests.Session.get")
def test_failed_first_fetch_writes_no_cache(mock_get: Mock, service: ArticleService) -> None:
    mock_get.return_value = json_response({"error": "unauthorized"}, status_code=401)

    with pytest.raises(ArticleFetchError):
        service.fetch()

    assert not service.cache.exists()


def test_estimate_refresh_without_cache(service: ArticleService) -> None:
    assert service.estimate_refresh() is None


def test_estimate_refresh_counts_pages() -> None:
    cache = ArticleCache()
    cache.save([make_article(i, f"Draft {i}") for i in range(1, 6)])
    service = ArticleService("key", cache=cache, config=FetchConfig(page_size=2, request_delay=1.0))

    assert service.estimate_refresh() == RefreshEstimate(cached_count=5, pages=3, seconds=3)


@patch("dtdrafts.articles.client.requests.Session.get")
def test_fetch_articles_wrapper_uses_cache(mock_get: Mock, sample_articles: list[Article]) -> None:
    ArticleCache().save(sample_articles)

    assert fetch_articles("key") == sample_articles
    mock_get.assert_not_called()
