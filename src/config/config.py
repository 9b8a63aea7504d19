"""Configuration for the post renderer."""

import os
from typing import ClassVar, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Загружаем переменные окружения из .env файла
load_dotenv()

SUPPORTED_LOCALES = ("en-US", "en-GB")


class Config(BaseModel):
    """Settings injected into the renderer, page and loader."""

    # Resource settings
    site_root: str = Field(default=".")
    posts_path: str = Field(default="data/posts.json")
    request_timeout: int = Field(default=30)

    # Page settings
    container_id: str = Field(default="posts-container")
    locale: str = Field(default="en-US")
    template_path: str = Field(default="index.html")
    output_path: str = Field(default="build/index.html")

    # Filters applied after the initial render
    filter_tag: Optional[str] = None
    search_query: Optional[str] = None

    ENV_MAPPING: ClassVar[dict] = {
        "SITE_ROOT": "site_root",
        "POSTS_PATH": "posts_path",
        "REQUEST_TIMEOUT": "request_timeout",
        "CONTAINER_ID": "container_id",
        "LOCALE": "locale",
        "TEMPLATE_PATH": "template_path",
        "OUTPUT_PATH": "output_path",
        "FILTER_TAG": "filter_tag",
        "SEARCH_QUERY": "search_query",
    }

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Build settings from environment variables, explicit overrides win."""
        values = {}
        for env_name, field_name in cls.ENV_MAPPING.items():
            env_value = os.getenv(env_name)
            if env_value:
                values[field_name] = env_value
        values.update(overrides)
        return cls(**values)

    @field_validator("locale")
    @classmethod
    def check_locale(cls, v: str) -> str:
        """Проверка поддерживаемой локали."""
        if v not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale {v!r}, expected one of {', '.join(SUPPORTED_LOCALES)}")
        return v

    @field_validator("container_id", "posts_path")
    @classmethod
    def check_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()

    @field_validator("request_timeout")
    @classmethod
    def check_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")
        return v

    @property
    def is_remote(self) -> bool:
        """True when the site root is served over HTTP."""
        return self.site_root.startswith(("http://", "https://"))
