"""Data models for the post renderer."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from common.exceptions import PostRendererError


def _to_text(v: Any) -> Any:
    if isinstance(v, bool):
        return str(v).lower()
    if isinstance(v, (int, float)):
        return str(v)
    return v


class Post(BaseModel):
    """Модель поста.

    Records come straight from the JSON resource, so every field is optional
    and unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    title: str = ""
    excerpt: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[list[str]] = None
    date: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None

    @field_validator("id", "excerpt", "description", "image", "date", "author", "url", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        """Числа приводятся к строке."""
        return _to_text(v)

    @field_validator("title", mode="before")
    @classmethod
    def clean_title(cls, v: Any) -> Any:
        """Отсутствующий заголовок становится пустой строкой."""
        if v is None:
            return ""
        return _to_text(v)

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v: Any) -> Optional[list]:
        """Теги не в виде списка считаются отсутствующими."""
        if not isinstance(v, list):
            return None
        return [_to_text(tag) for tag in v if tag is not None]

    @property
    def excerpt_text(self) -> str:
        return self.excerpt or self.description or ""

    @property
    def link(self) -> str:
        return self.url or "#"


class LoadResult(BaseModel):
    """Outcome of a single load: the rendered posts or the caught error."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    posts: list[Post] = []
    error: Optional[PostRendererError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
