"""
Модуль для загрузки и отрисовки постов.
"""

from .filters import filter_by_tag, find_post_elements, search_posts
from .formatter import format_date
from .loader import PostLoader
from .post_renderer import PostRenderer
from .sanitizer import escape_html

__all__ = [
    "PostLoader",
    "PostRenderer",
    "escape_html",
    "filter_by_tag",
    "find_post_elements",
    "format_date",
    "search_posts",
]
