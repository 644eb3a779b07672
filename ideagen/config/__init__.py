"""
Configuration module.

Handles environment variables, API keys, and server settings.
"""

from ideagen.config.config import (
    APP_ENV,
    DEBUG,
    HOST,
    PORT,
    SESSION_SECRET,
    OPENAI_API_KEY,
    OPENAI_MODEL,
    OPENAI_API_URL,
    GENERATION_TEMPERATURE,
    GENERATION_MAX_TOKENS,
    REQUEST_TIMEOUT,
    DATABASE_URL,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "HOST",
    "PORT",
    "SESSION_SECRET",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_API_URL",
    "GENERATION_TEMPERATURE",
    "GENERATION_MAX_TOKENS",
    "REQUEST_TIMEOUT",
    "DATABASE_URL",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
