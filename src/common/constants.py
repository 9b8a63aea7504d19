"""Shared constants for the post renderer."""

POST_RENDERER_STR = "post_renderer"

LOAD_ERROR_MESSAGE = "Failed to load posts. Please try again later."
NO_POSTS_MESSAGE = "No posts available."
