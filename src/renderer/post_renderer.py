"""Rendering of posts into a page container."""

from typing import Callable, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from common import logger
from common.constants import LOAD_ERROR_MESSAGE, NO_POSTS_MESSAGE
from common.exceptions import ParseOrRuntimeError, PostRendererError
from config.config import Config
from models.models import LoadResult, Post
from renderer import filters
from renderer.formatter import format_date
from renderer.loader import PostLoader
from renderer.sanitizer import escape_html

UNSAFE_URL_SCHEMES = ("javascript", "vbscript", "data")


class PostRenderer:
    """Loads posts, renders them into a container and filters the result."""

    def __init__(self, config: Config, loader_factory: Optional[Callable[[Config], PostLoader]] = None):
        logger.info("[PostRenderer] Initializing renderer for #%s", config.container_id)
        self.config = config
        self.loader_factory = loader_factory or PostLoader

    async def load_posts(self, container: Optional[Tag]) -> LoadResult:
        """
        Load posts and render them into the container.

        Errors never propagate: they are logged, the container shows a fixed
        error message and the error is returned in the result.
        """
        try:
            async with self.loader_factory(self.config) as loader:
                posts = await loader.fetch_posts()
            if not self.render_posts(posts, container):
                raise ParseOrRuntimeError("Posts container not found")
            return LoadResult(posts=posts)
        except PostRendererError as e:
            logger.error("[PostRenderer] Error loading posts: %s", e)
            self.display_error(LOAD_ERROR_MESSAGE, container)
            return LoadResult(error=e)
        except Exception as e:
            logger.error("[PostRenderer] Unexpected error loading posts: %s", e, exc_info=True)
            self.display_error(LOAD_ERROR_MESSAGE, container)
            return LoadResult(error=ParseOrRuntimeError(str(e)))

    def render_posts(self, posts: list, container: Optional[Tag]) -> bool:
        """Отрисовка постов в контейнер. False если контейнер не найден."""
        if container is None:
            logger.error("[PostRenderer] Posts container not found")
            return False

        container.clear()

        if not posts:
            container.append(self._fragment(f'<p class="no-posts">{NO_POSTS_MESSAGE}</p>').p)
            return True

        for post in posts:
            container.append(self.create_post_element(post))
        logger.debug("[PostRenderer] Rendered %d posts", len(posts))
        return True

    def create_post_element(self, post: Post) -> Tag:
        """Создание разметки одного поста."""
        image_html = ""
        if post.image:
            image_html = (
                f'<img src="{escape_html(post.image)}" alt="{escape_html(post.title)}" class="post-image">'
            )

        tags_html = ""
        if post.tags is not None:
            tag_spans = "".join(f'<span class="tag">{escape_html(tag)}</span>' for tag in post.tags)
            tags_html = f'<div class="post-tags">{tag_spans}</div>'

        author_html = ""
        if post.author:
            author_html = f'<span class="post-author">By {escape_html(post.author)}</span>'

        markup = (
            f'<article class="post" data-id="{escape_html(post.id)}">'
            '<div class="post-content">'
            f"{image_html}"
            '<div class="post-text">'
            f'<h2 class="post-title">{escape_html(post.title)}</h2>'
            f'<p class="post-excerpt">{escape_html(post.excerpt_text)}</p>'
            f"{tags_html}"
            '<div class="post-meta">'
            f'<span class="post-date">{escape_html(format_date(post.date, self.config.locale))}</span>'
            f"{author_html}"
            "</div>"
            f'<a href="{escape_html(self.safe_link(post))}" class="post-link">Read More</a>'
            "</div>"
            "</div>"
            "</article>"
        )
        return self._fragment(markup).article

    def safe_link(self, post: Post) -> str:
        """Ссылка поста, небезопасные схемы заменяются на '#'."""
        link = post.link
        scheme = urlparse(link.strip()).scheme.lower()
        if scheme in UNSAFE_URL_SCHEMES:
            logger.warning("[PostRenderer] Unsafe link for post %s: %s", post.id, link)
            return "#"
        return link

    def display_error(self, message: str, container: Optional[Tag]) -> None:
        if container is None:
            return
        container.clear()
        container.append(self._fragment(f'<div class="error-message">{escape_html(message)}</div>').div)

    def filter_by_tag(self, tag: str, root: Tag) -> list:
        """Фильтрация отрисованных постов по тегу."""
        return filters.filter_by_tag(tag, filters.find_post_elements(root))

    def search_posts(self, query: str, root: Tag) -> list:
        """Поиск по заголовку и описанию отрисованных постов."""
        return filters.search_posts(query, filters.find_post_elements(root))

    @staticmethod
    def _fragment(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")
