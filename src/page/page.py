"""HTML page holding the posts container."""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Optional

import aiofiles
from bs4 import BeautifulSoup, Tag

from common import logger
from config.config import Config
from models.models import LoadResult
from renderer.post_renderer import PostRenderer

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Posts</title>
</head>
<body>
<main id="{container_id}"></main>
</body>
</html>
"""


class PageState(str, Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"
    RENDERED = "rendered"
    FAILED = "failed"


class PostPage:
    """Документ страницы с контейнером постов."""

    def __init__(self, html: str, config: Config, renderer: Optional[PostRenderer] = None):
        self.config = config
        self.soup = BeautifulSoup(html, "html.parser")
        self.renderer = renderer or PostRenderer(config)
        self.state = PageState.UNLOADED
        self.result: Optional[LoadResult] = None
        self._load_task: Optional[asyncio.Future] = None

    @classmethod
    async def load_template(cls, config: Config, renderer: Optional[PostRenderer] = None) -> "PostPage":
        """Читает шаблон страницы, при его отсутствии использует шаблон по умолчанию."""
        path = Path(config.template_path)
        if not path.exists():
            logger.warning("Template %s not found, using the default page", path)
            return cls(DEFAULT_TEMPLATE.format(container_id=config.container_id), config, renderer)
        async with aiofiles.open(path, encoding="utf-8") as f:
            html = await f.read()
        logger.info("Loaded page template from %s", path)
        return cls(html, config, renderer)

    @property
    def container(self) -> Optional[Tag]:
        return self.soup.find(id=self.config.container_id)

    async def on_ready(self) -> LoadResult:
        """Загрузка постов, выполняется один раз за жизненный цикл страницы."""
        if self._load_task is None:
            self.state = PageState.LOADED
            self._load_task = asyncio.ensure_future(self._load())
        else:
            logger.warning("Page already loaded, ignoring repeated ready event")
        return await self._load_task

    async def _load(self) -> LoadResult:
        self.result = await self.renderer.load_posts(self.container)
        self.state = PageState.RENDERED if self.result.ok else PageState.FAILED
        logger.info("Page state: %s", self.state.value)
        return self.result

    def filter_by_tag(self, tag: str) -> list:
        return self.renderer.filter_by_tag(tag, self.soup)

    def search_posts(self, query: str) -> list:
        return self.renderer.search_posts(query, self.soup)

    def render(self) -> str:
        return str(self.soup)

    async def save(self, output_path: Optional[str] = None) -> Path:
        """Сохраняет HTML страницы в файл."""
        filepath = Path(output_path or self.config.output_path)
        if not filepath.parent.exists():
            filepath.parent.mkdir(parents=True)
        async with aiofiles.open(filepath, "w", encoding="utf-8") as f:
            await f.write(self.render())
        logger.info("Saved page to %s", filepath)
        return filepath
