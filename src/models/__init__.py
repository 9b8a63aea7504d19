"""
Models Package

A package containing data models for the application.
"""

from .models import LoadResult, Post

__all__ = ["LoadResult", "Post"]
