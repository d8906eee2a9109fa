"""Infrastructure layer: HTTP access to the PasswordPing API."""

from passwordping.infrastructure.api_client import PasswordPing

__all__ = ["PasswordPing"]
