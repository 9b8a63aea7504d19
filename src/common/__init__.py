"""
Common Package

Shared logger instance and constants.
"""

from .logger import Logger

logger = Logger()

__all__ = ["Logger", "logger"]
