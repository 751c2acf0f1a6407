"""
Configuration management for Azure artifact storage.
"""

from src.config.log import configure_from_settings, configure_logging
from src.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging", "configure_from_settings"]
