"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    BASE_MAX_ATTEMPTS, DEFAULT_MAX_WORD_LENGTH, DEFAULT_MIN_WORD_LENGTH,
    SPLIT_MANIFEST_SUFFIX, get_word_statistics, max_attempts_for_length,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'BASE_MAX_ATTEMPTS', 'DEFAULT_MIN_WORD_LENGTH', 'DEFAULT_MAX_WORD_LENGTH',
    'SPLIT_MANIFEST_SUFFIX', 'get_word_statistics', 'max_attempts_for_length',
]
