"""Linear-scan filters over cached articles.

Every function only considers drafts (``published is False``) and keeps
the input order.
"""

from __future__ import annotations

from typing import Iterable

from dtdrafts.articles.models import Article


def all_unpublished(articles: Iterable[Article]) -> list[Article]:
    return [article for article in articles if not article.published]


def search_by_title(articles: Iterable[Article], query: str) -> list[Article]:
    """Drafts whose title contains ``query``, ignoring case."""
    needle = query.lower()
    return [article for article in all_unpublished(articles) if needle in article.title.lower()]


def search_by_body(articles: Iterable[Article], query: str) -> list[Article]:
    """Drafts whose markdown body contains ``query``, ignoring case."""
    needle = query.lower()
    return [article for article in all_unpublished(articles) if _body_contains(article, needle)]


def search_by_tag(articles: Iterable[Article], tag: str) -> list[Article]:
    """Drafts carrying exactly ``tag``. Partial tags do not match."""
    return [article for article in all_unpublished(articles) if tag in (article.tags or [])]


def search_articles(articles: Iterable[Article], query: str) -> list[Article]:
    """Drafts matching ``query`` in the title, the body, or as a whole tag."""
    needle = query.lower()
    return [
        article
        for article in all_unpublished(articles)
        if needle in article.title.lower()
        or _body_contains(article, needle)
        or any(tag.lower() == needle for tag in article.tags or [])
    ]


def _body_contains(article: Article, needle: str) -> bool:
    return article.body_markdown is not None and needle in article.body_markdown.lower()


__all__ = [
    "all_unpublished",
    "search_articles",
    "search_by_body",
    "search_by_tag",
    "search_by_title",
]
