"""Unix-crypt style formats whose salt string carries an envelope.

MD5Crypt salts look like ``$1$<salt>`` and phpBB3 salts like
``$H$<count><salt>``; the computed hash keeps that envelope and appends
the 22-character hash64 checksum.
"""

import logging
import re
from typing import Optional
from passlib.hash import md5_crypt, phpass
from passwordping.domain.errors import InvalidSaltError
from passwordping.interfaces.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

# Alphabet shared by md5-crypt and phpass for salts and checksums
ITOA64 = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_HASH64_SALT = re.compile(r"^[./0-9A-Za-z]*$")


class Md5CryptHasher(PasswordHasher):
    """Classic FreeBSD MD5-crypt: ``$1$<salt>$<checksum>``."""

    requires_salt = True

    PREFIX = "$1$"
    MAX_SALT_LENGTH = 8

    def hash(self, password: str, salt: Optional[str]) -> str:
        raw_salt = salt[len(self.PREFIX):] if salt.startswith(self.PREFIX) else salt
        # A full hash may be passed in; the salt ends at the next separator
        raw_salt = raw_salt.split("$", 1)[0][:self.MAX_SALT_LENGTH]

        if not raw_salt or not _HASH64_SALT.match(raw_salt):
            raise InvalidSaltError(f"Invalid MD5Crypt salt: {salt!r}")

        return md5_crypt.using(salt=raw_salt).hash(password)


class Phpbb3Hasher(PasswordHasher):
    """phpBB3 / phpass portable hash: ``$H$<count><8-char salt><checksum>``.

    The count character encodes log2 of the MD5 iteration count as its
    position in ITOA64.
    """

    requires_salt = True

    PREFIX = "$H$"
    SALT_LENGTH = 8
    MIN_ROUNDS = 7
    MAX_ROUNDS = 30

    def hash(self, password: str, salt: Optional[str]) -> str:
        setting_length = len(self.PREFIX) + 1 + self.SALT_LENGTH
        if not salt.startswith(self.PREFIX) or len(salt) < setting_length:
            raise InvalidSaltError(f"Invalid PHPBB3 salt: {salt!r}")

        rounds = ITOA64.find(salt[len(self.PREFIX)])
        raw_salt = salt[len(self.PREFIX) + 1:setting_length]

        if not self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS:
            raise InvalidSaltError(f"Invalid PHPBB3 iteration count in salt: {salt!r}")
        if not _HASH64_SALT.match(raw_salt):
            raise InvalidSaltError(f"Invalid PHPBB3 salt characters: {salt!r}")

        logger.debug(f"PHPBB3 hash with 2^{rounds} MD5 rounds")
        return phpass.using(salt=raw_salt, rounds=rounds, ident="H").hash(password)
