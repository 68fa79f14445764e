"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .game_settings import DEFAULT_MAX_WORD_LENGTH, DEFAULT_MIN_WORD_LENGTH

# Load environment variables from config.env beside this module
load_dotenv(Path(__file__).parent / 'config.env')


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


def _env_optional_int(name: str):
    value = os.getenv(name)
    return int(value) if value not in (None, '') else None


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Dictionary Settings
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH', 'data/scrabble-dictionary.dat')
    DICTIONARY_SPLIT = _env_flag('DICTIONARY_SPLIT')

    # Game Settings
    MIN_WORD_LENGTH = int(os.getenv('MIN_WORD_LENGTH', DEFAULT_MIN_WORD_LENGTH))
    MAX_WORD_LENGTH = int(os.getenv('MAX_WORD_LENGTH', DEFAULT_MAX_WORD_LENGTH))
    HARD_MODE = _env_flag('HARD_MODE')
    RANDOM_SEED = _env_optional_int('RANDOM_SEED')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    RANDOM_SEED = 1234


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
