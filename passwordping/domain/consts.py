"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class PasswordType(int, Enum):
    """Password hash formats the API can ask for.

    Values are the service's own registry numbers. Numbers missing from
    this enum (4 TripleDES, 12 SCrypt, ...) exist on the server side but
    cannot be computed by this library.
    """
    MD5 = 1
    SHA1 = 2
    SHA256 = 3
    IPBoard_MyBB = 5
    VBulletinPre3_8_5 = 6
    VBulletinPost3_8_5 = 7
    BCrypt = 8
    CRC32 = 9
    PHPBB3 = 10
    CustomAlgorithm1 = 11
    CustomAlgorithm2 = 13
    SHA512 = 14
    MD5Crypt = 16
    CustomAlgorithm4 = 17


# bcrypt-based formats are capped per credentials check (see Config.MAX_BCRYPT_HASHES)
BCRYPT_PASSWORD_TYPES = frozenset({PasswordType.BCrypt, PasswordType.CustomAlgorithm4})


class ApiPaths:
    """Resource paths relative to the versioned base URL."""
    VERSION_PREFIX = "/v1"
    PASSWORDS = "/passwords"
    ACCOUNTS = "/accounts"
    CREDENTIALS = "/credentials"
    EXPOSURES = "/exposures"


class ApiParams:
    """Query parameter names."""
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    USERNAME = "username"
    HASHES = "hashes"
    ID = "id"


class ErrorMessages:
    """Fixed error message strings."""
    MISSING_CREDENTIALS = "API key and Secret must be provided"
    UNEXPECTED_TRANSPORT_ERROR = "Unexpected error calling PasswordPing API"
    UNEXPECTED_RESPONSE = "Unexpected error from PasswordPing API"


class Argon2Params:
    """Parameters of the argon2d credential hash expected by the service."""
    TIME_COST = 3
    MEMORY_COST = 1024  # KiB
    PARALLELISM = 2
    HASH_LENGTH = 20


class HashDisplay:
    """Constants for hash display."""
    PREFIX_LENGTH = 8  # Number of characters to show in logs (e.g., "1d0b28c7...")
