"""Visibility filters over already-rendered post elements."""

from typing import Iterable

from bs4 import Tag

POST_SELECTOR = ".post"
TAG_SELECTOR = ".tag"
TITLE_SELECTOR = ".post-title"
EXCERPT_SELECTOR = ".post-excerpt"

SHOWN_STYLE = "display: block"
HIDDEN_STYLE = "display: none"


def find_post_elements(root: Tag) -> list:
    """Все отрисованные посты внутри документа или контейнера."""
    if root is None:
        return []
    return root.select(POST_SELECTOR)


def set_visible(element: Tag, visible: bool) -> None:
    element["style"] = SHOWN_STYLE if visible else HIDDEN_STYLE


def is_visible(element: Tag) -> bool:
    return element.get("style") != HIDDEN_STYLE


def _selected_text(element: Tag, selector: str) -> str:
    found = element.select_one(selector)
    return found.get_text() if found else ""


def filter_by_tag(tag: str, elements: Iterable[Tag]) -> list:
    """
    Show the posts carrying the given tag and hide the rest.

    Args:
        tag (str): Tag text, matched exactly
        elements: Rendered post elements

    Returns:
        list: The elements left visible
    """
    shown = []
    for element in elements:
        tags = [t.get_text() for t in element.select(TAG_SELECTOR)]
        matches = tag in tags
        set_visible(element, matches)
        if matches:
            shown.append(element)
    return shown


def search_posts(query: str, elements: Iterable[Tag]) -> list:
    """
    Show the posts whose title or excerpt contains the query, case-insensitively.

    Args:
        query (str): Free-text query
        elements: Rendered post elements

    Returns:
        list: The elements left visible
    """
    lower_query = query.lower()
    shown = []
    for element in elements:
        title = _selected_text(element, TITLE_SELECTOR).lower()
        excerpt = _selected_text(element, EXCERPT_SELECTOR).lower()
        matches = lower_query in title or lower_query in excerpt
        set_visible(element, matches)
        if matches:
            shown.append(element)
    return shown
