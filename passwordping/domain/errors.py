"""Exceptions raised by the PasswordPing client and hash engine."""

from typing import Optional


class PasswordPingError(Exception):
    """Base exception for everything raised by this library."""


class ConfigurationError(PasswordPingError, ValueError):
    """Raised when the client or environment is misconfigured."""


class ValidationError(PasswordPingError, ValueError):
    """Raised when a hash cannot be computed from the given input."""


class InvalidSaltError(ValidationError):
    """Raised when a salted format gets no salt or a malformed one."""


class UnsupportedPasswordTypeError(ValidationError):
    """Raised for hash types this library cannot compute."""


class TransportError(PasswordPingError):
    """Raised when the API cannot be reached (DNS, connect, timeout, TLS)."""

    def __init__(self, message: str, host: Optional[str] = None) -> None:
        self.message = message
        self.host = host
        super().__init__(message)


class APIError(PasswordPingError):
    """Raised when the API answers with an unexpected status or an unparsable body."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)
