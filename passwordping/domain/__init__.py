"""Domain models, constants and errors."""

from passwordping.domain.models import (
    HashRequest,
    ExposureSummary,
    ExposureDetail,
    PasswordHashSpecification,
    AccountResponse,
)
from passwordping.domain.consts import (
    PasswordType,
    BCRYPT_PASSWORD_TYPES,
    ApiPaths,
    ApiParams,
    ErrorMessages,
    Argon2Params,
    HashDisplay,
)
from passwordping.domain.errors import (
    PasswordPingError,
    ConfigurationError,
    ValidationError,
    InvalidSaltError,
    UnsupportedPasswordTypeError,
    TransportError,
    APIError,
)

__all__ = [
    "HashRequest",
    "ExposureSummary",
    "ExposureDetail",
    "PasswordHashSpecification",
    "AccountResponse",
    "PasswordType",
    "BCRYPT_PASSWORD_TYPES",
    "ApiPaths",
    "ApiParams",
    "ErrorMessages",
    "Argon2Params",
    "HashDisplay",
    "PasswordPingError",
    "ConfigurationError",
    "ValidationError",
    "InvalidSaltError",
    "UnsupportedPasswordTypeError",
    "TransportError",
    "APIError",
]
