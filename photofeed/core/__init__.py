"""Core: config, limiter, lifespan and exception handlers.

Single place for settings and application bootstrap.
"""

from photofeed.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
