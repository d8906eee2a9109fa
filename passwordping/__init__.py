"""Client library for the PasswordPing credential breach API.

Checks passwords and username/password pairs against known breaches,
looks up exposures, and computes legacy password hash formats so only
hashes are ever sent to the service.
"""

from passwordping.config.config import VERSION
from passwordping.domain import (
    PasswordType,
    HashRequest,
    ExposureSummary,
    ExposureDetail,
    PasswordPingError,
    ConfigurationError,
    ValidationError,
    InvalidSaltError,
    UnsupportedPasswordTypeError,
    TransportError,
    APIError,
)
from passwordping.factories import calc_password_hash, compute_hash, create_hasher
from passwordping.infrastructure import PasswordPing

__version__ = VERSION

__all__ = [
    "PasswordPing",
    "PasswordType",
    "HashRequest",
    "ExposureSummary",
    "ExposureDetail",
    "calc_password_hash",
    "compute_hash",
    "create_hasher",
    "PasswordPingError",
    "ConfigurationError",
    "ValidationError",
    "InvalidSaltError",
    "UnsupportedPasswordTypeError",
    "TransportError",
    "APIError",
]
