"""
Configuration module for Moodtunes.
"""

from .settings import (
    AppConfig,
    ConfigManager,
    ConfigValidationError,
    DEFAULT_CONFIG_PATH,
)

__all__ = ['AppConfig', 'ConfigManager', 'ConfigValidationError', 'DEFAULT_CONFIG_PATH']
