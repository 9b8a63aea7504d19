"""Command line entry point: build the posts page."""

import asyncio
import sys

from pydantic import ValidationError

from common import logger
from config.config import Config
from page.page import PostPage
from renderer import filters


class PageBuilder:
    """Класс для сборки страницы с постами."""

    def __init__(self, config: Config):
        self.config = config

    async def build(self) -> PostPage:
        """Загрузка шаблона, отрисовка постов, фильтры и сохранение."""
        page = await PostPage.load_template(self.config)
        result = await page.on_ready()
        if result.ok:
            logger.info("Rendered %d posts", len(result.posts))
            shown = None
            if self.config.filter_tag:
                shown = page.filter_by_tag(self.config.filter_tag)
                logger.info("Tag filter %r left %d posts visible", self.config.filter_tag, len(shown))
            if self.config.search_query:
                # поиск только среди постов, оставшихся после фильтра по тегу
                if shown is None:
                    shown = page.search_posts(self.config.search_query)
                else:
                    shown = filters.search_posts(self.config.search_query, shown)
                logger.info("Search %r left %d posts visible", self.config.search_query, len(shown))
        else:
            logger.warning("Page rendered with an error: %s", result.error)
        await page.save()
        return page


def main() -> None:
    """Точка входа в приложение."""
    try:
        config = Config.from_env()
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)
    try:
        asyncio.run(PageBuilder(config).build())
    except Exception as e:
        logger.error("Fatal error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
