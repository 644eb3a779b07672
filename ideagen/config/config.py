"""
Configuration module for the Startup Idea Generator.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of ideagen/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose logging and the Flask debugger
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Server Configuration
# =============================================================================

# Bind address for the HTTP server
HOST: str = os.getenv("HOST", "0.0.0.0")

# Listen port for the HTTP server
PORT: int = int(os.getenv("PORT", "5000"))

# Secret used by Flask to sign session cookies
DEFAULT_SESSION_SECRET = "startup-generator-secret"
SESSION_SECRET: str = os.getenv("SESSION_SECRET", DEFAULT_SESSION_SECRET)


# =============================================================================
# Completion Provider Configuration
# =============================================================================

# API key for the chat-completion provider
# Required for production; empty string as default for development
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

# Model used for idea generation
OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")

# OpenAI-compatible chat completions endpoint
OPENAI_API_URL: str = os.getenv(
    "OPENAI_API_URL", "https://api.openai.com/v1/chat/completions"
)

# Sampling temperature - on the creative side so repeated topics give variety
GENERATION_TEMPERATURE: float = float(os.getenv("GENERATION_TEMPERATURE", "0.8"))

# Upper bound on tokens in a single generated idea
GENERATION_MAX_TOKENS: int = int(os.getenv("GENERATION_MAX_TOKENS", "600"))

# HTTP request timeout in seconds for the provider call
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))


# =============================================================================
# Database Configuration (reserved)
# =============================================================================

# Connection string for an external database; the in-memory store ignores it
DATABASE_URL: str = os.getenv("DATABASE_URL", "")


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    if is_production():
        if not OPENAI_API_KEY:
            errors.append("OPENAI_API_KEY is required in production")
        if SESSION_SECRET == DEFAULT_SESSION_SECRET:
            errors.append("SESSION_SECRET must be changed from the default in production")

    if not (1 <= PORT <= 65535):
        errors.append(f"PORT must be between 1 and 65535, got {PORT}")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    if GENERATION_MAX_TOKENS < 1:
        errors.append("GENERATION_MAX_TOKENS must be at least 1")

    if not (0.0 <= GENERATION_TEMPERATURE <= 2.0):
        errors.append(
            f"GENERATION_TEMPERATURE must be between 0.0 and 2.0, got {GENERATION_TEMPERATURE}"
        )

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  HOST: {HOST}")
    print(f"  PORT: {PORT}")
    print(f"  OPENAI_API_KEY: {'***' if OPENAI_API_KEY else '(not set)'}")
    print(f"  OPENAI_MODEL: {OPENAI_MODEL}")
    print(f"  OPENAI_API_URL: {OPENAI_API_URL}")
    print(f"  GENERATION_TEMPERATURE: {GENERATION_TEMPERATURE}")
    print(f"  GENERATION_MAX_TOKENS: {GENERATION_MAX_TOKENS}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  SESSION_SECRET: {'(default)' if SESSION_SECRET == DEFAULT_SESSION_SECRET else '***'}")
    print(f"  DATABASE_URL: {'***' if DATABASE_URL else '(not set)'}")
