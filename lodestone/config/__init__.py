"""
Lodestone Configuration.

Environment variables, settings, and logging configuration.
"""

from lodestone.config.log_setup import configure_logging
from lodestone.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
