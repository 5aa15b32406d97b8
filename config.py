"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import MAX_ITEMS_PER_REQUEST


def _int_env(name, default):
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    JSON_SORT_KEYS = False
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max request body

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Request limits
    MAX_ITEMS_PER_REQUEST = _int_env('MAX_ITEMS_PER_REQUEST', MAX_ITEMS_PER_REQUEST)

    # Portions assumed when a recipe doesn't say
    DEFAULT_PORTIONS = 4


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    MAX_ITEMS_PER_REQUEST = 5


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
