"""Errors raised while loading and rendering posts."""

from typing import Optional


class PostRendererError(Exception):
    """Base error for the post renderer."""


class RetrievalError(PostRendererError):
    """The posts resource could not be retrieved."""

    def __init__(self, status: Optional[int] = None, message: str = ""):
        self.status = status
        if not message:
            message = f"HTTP error! status: {status}" if status is not None else "Network error"
        super().__init__(message)


class ParseOrRuntimeError(PostRendererError):
    """The posts resource was retrieved but could not be parsed or rendered."""
