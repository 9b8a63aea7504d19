"""HTML escaping for record-derived text."""

import re
from typing import Any

HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}

_ESCAPE_RE = re.compile(r"[&<>\"']")


def escape_html(text: Any) -> str:
    """
    Escape the five HTML-significant characters in the given text.

    Args:
        text: The value to escape, ``None`` is treated as empty text

    Returns:
        str: The escaped text
    """
    if text is None:
        return ""
    return _ESCAPE_RE.sub(lambda m: HTML_ESCAPES[m.group(0)], str(text))
