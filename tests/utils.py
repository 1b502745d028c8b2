"""Builders for article payloads and HTTP responses used across tests."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any
from unittest.mock import Mock

from loguru import logger

from dtdrafts.articles.models import Article


def article_payload(
    article_id: int,
    title: str,
    *,
    body: str | None = None,
    tags: list[str] | None = None,
    published: bool = False,
    username: str = "user",
) -> dict[str, Any]:
    """A dict shaped like one element of the dev.to ``/articles/me`` response."""
    slug = title.lower().replace(" ", "-")
    return {
        "type_of": "article",
        "id": article_id,
        "title": title,
        "description": f"About {title}",
        "body_markdown": body,
        "url": f"https://dev.to/{username}/{slug}",
        "canonical_url": None,
        "published": published,
        "tag_list": tags or [],
        "slug": slug,
        "user": {"name": "Test User", "username": username},
    }


def make_article(article_id: int, title: str, **kwargs: Any) -> Article:
    return Article.model_validate(article_payload(article_id, title, **kwargs))


def json_response(payload: Any, status_code: int = 200) -> Mock:
    """Mock ``requests.Response`` returning ``payload`` from ``.json()``."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = payload
    return response


def page_of(start_id: int, size: int) -> list[dict[str, Any]]:
    return [article_payload(start_id + offset, f"Draft {start_id + offset}") for offset in range(size)]


@contextmanager
def logger_to_stderr(level: str = "INFO"):
    """Temporarily route Loguru output to stderr for assertion."""

    handler_id = logger.add(sys.stderr, level=level)
    try:
        yield
    finally:
        logger.remove(handler_id)
