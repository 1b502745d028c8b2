"""Settings for talking to the dev.to articles API."""

from __future__ import annotations

from pydantic import Field

from dtdrafts import __version__

from .base import BaseConfig


class FetchConfig(BaseConfig):
    """Endpoint, pagination and pacing used when downloading drafts."""

    base_url: str = Field("https://dev.to/api", description="dev.to API root URL")
    page_size: int = Field(1000, description="Articles requested per page (API maximum is 1000)", ge=1, le=1000)
    request_delay: float = Field(1.0, description="Seconds to wait between page requests", ge=0)
    timeout: float = Field(30.0, description="Per-request timeout in seconds", gt=0)
    user_agent: str = Field(f"dtdrafts/{__version__}", description="User-Agent header sent with every request")


__all__ = ["FetchConfig"]
