"""Runtime configuration."""

from passwordping.config.config import Config, config

__all__ = ["Config", "config"]
