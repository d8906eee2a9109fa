"""Configuration loaded from environment variables."""

import os

from passwordping.domain.errors import ConfigurationError

VERSION = "1.0.0"


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ConfigurationError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ConfigurationError(f"Invalid float value for {key}")


class Config:
    """Centralized configuration from environment variables."""
    
    # Credentials (empty means "not configured")
    API_KEY: str = os.getenv("PP_API_KEY", "")
    API_SECRET: str = os.getenv("PP_API_SECRET", "")
    
    # Base API host, without scheme or path
    API_HOST: str = os.getenv("PP_API_HOST", "api.passwordping.com")
    
    # Timeouts
    REQUEST_TIMEOUT: float = _get_env_float("PP_REQUEST_TIMEOUT", "10.0")
    
    # bcrypt is slow on purpose; an account may ask for several bcrypt hashes
    # and only the first MAX_BCRYPT_HASHES are computed
    MAX_BCRYPT_HASHES: int = _get_env_int("PP_MAX_BCRYPT_HASHES", "2")
    
    USER_AGENT: str = os.getenv("PP_USER_AGENT", f"passwordping-python/{VERSION}")


config = Config()
