"""Article records as returned by the dev.to API and stored in the cache."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

EDIT_URL_TEMPLATE = "https://dev.to/{username}/{slug}/edit"


class ArticleUser(BaseModel):
    """Author information embedded in each article."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: str


class Article(BaseModel):
    """A single dev.to article. Drafts have ``published`` set to ``False``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: str
    description: str | None = None
    body_markdown: str | None = None
    url: str
    canonical_url: str | None = None
    url_with_preview: str | None = None
    published: bool
    created_at: str | None = None
    updated_at: str | None = None
    tags: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("tags", "tag_list"),
    )
    slug: str
    user: ArticleUser

    @field_validator("tags", mode="before")
    @classmethod
    def _normalise_tags(cls, value: Any) -> Any:
        # The API sends "python, cli" on some endpoints and ["python", "cli"] on others.
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(tag).strip() for tag in value if str(tag).strip()]
        return value

    @property
    def is_draft(self) -> bool:
        return not self.published

    @property
    def edit_url(self) -> str:
        return EDIT_URL_TEMPLATE.format(username=self.user.username, slug=self.slug)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


__all__ = ["Article", "ArticleUser"]
