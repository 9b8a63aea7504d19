from .config import SUPPORTED_LOCALES, Config

__all__ = ["Config", "SUPPORTED_LOCALES"]
