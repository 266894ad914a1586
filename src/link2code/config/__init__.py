"""Configuration for link2code."""

from link2code.config.logging import configure_logging
from link2code.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
