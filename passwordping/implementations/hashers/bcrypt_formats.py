"""bcrypt and bcrypt-derived formats."""

import re
from typing import Optional
import bcrypt
from passwordping.domain.errors import InvalidSaltError
from passwordping.interfaces.password_hasher import PasswordHasher
from passwordping.implementations.hashers.digests import md5_hex

# $2a$/$2b$/$2x$/$2y$, two-digit cost, 22 hash64 salt characters
_BCRYPT_SALT = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{22}")

# bcrypt only reads the first 72 bytes of the key
MAX_PASSWORD_BYTES = 72


def bcrypt_hash(password: str, salt: str) -> str:
    """Hash `password` with an existing bcrypt salt, keeping its prefix.

    `salt` may be the 29-character setting or a complete 60-character hash.

    Raises:
        InvalidSaltError: If the salt is not a bcrypt setting
    """
    match = _BCRYPT_SALT.match(salt)
    if match is None:
        raise InvalidSaltError(f"Invalid bcrypt salt: {salt!r}")

    password_bytes = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
    try:
        hashed = bcrypt.hashpw(password_bytes, match.group(0).encode("ascii"))
    except ValueError as e:
        raise InvalidSaltError(f"Invalid bcrypt salt: {salt!r}") from e
    return hashed.decode("ascii")


class BCryptHasher(PasswordHasher):
    """Standard bcrypt: ``$2a$<cost>$<salt><digest>``."""

    requires_salt = True

    def hash(self, password: str, salt: Optional[str]) -> str:
        return bcrypt_hash(password, salt)


class CustomAlgorithm4Hasher(PasswordHasher):
    """bcrypt over the hex MD5 of the password, usually with a ``$2y$`` salt."""

    requires_salt = True

    def hash(self, password: str, salt: Optional[str]) -> str:
        return bcrypt_hash(md5_hex(password), salt)
