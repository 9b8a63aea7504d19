from .page import DEFAULT_TEMPLATE, PageState, PostPage

__all__ = ["DEFAULT_TEMPLATE", "PageState", "PostPage"]
