"""Flat JSON snapshot of previously fetched articles."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Sequence

from loguru import logger
from pydantic import ValidationError

from dtdrafts.articles.models import Article
from dtdrafts.config.paths import get_cache_file


class CacheError(RuntimeError):
    """Raised when the cache file cannot be read or written."""


class ArticleCache:
    """The articles cache file, replaced as a whole on every refresh."""

    def __init__(self, path: Path | None = None):
        self.path = path or get_cache_file()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> list[Article]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CacheError(f"Failed to load articles cache {self.path}: {exc}") from exc

        if not isinstance(payload, list):
            raise CacheError(f"Articles cache {self.path} does not contain a JSON array")
        try:
            articles = [Article.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise CacheError(f"Articles cache {self.path} is corrupt: {exc}") from exc

        logger.debug("Loaded {} articles from {}", len(articles), self.path)
        return articles

    def count(self) -> int:
        """Number of cached articles; 0 when the cache is absent or unreadable."""
        if not self.exists():
            return 0
        try:
            return len(self.load())
        except CacheError as exc:
            logger.warning("{}", exc)
            return 0

    def save(self, articles: Sequence[Article]) -> Path:
        """Atomically replace the cache with ``articles``."""
        document = json.dumps(
            [article.to_json_dict() for article in articles],
            indent=2,
        )
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeError) as exc:
            if tmp_path.exists():
                tmp_path.unlink()
            raise CacheError(f"Failed to save articles cache {self.path}: {exc}") from exc

        logger.info("Cached {} articles at {}", len(articles), self.path)
        return self.path


__all__ = ["ArticleCache", "CacheError"]
