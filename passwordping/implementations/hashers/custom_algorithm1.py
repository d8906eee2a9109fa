"""CustomAlgorithm1: SHA-512 and Whirlpool digests XORed together."""

import hashlib
from typing import Optional
import whirlpool
from passwordping.interfaces.password_hasher import PasswordHasher


class CustomAlgorithm1Hasher(PasswordHasher):
    """sha512(password . salt) XOR whirlpool(salt . password), as hex.

    Both digests are 64 bytes, so the output is always 128 hex characters.
    """

    requires_salt = True

    def hash(self, password: str, salt: Optional[str]) -> str:
        sha512_digest = hashlib.sha512((password + salt).encode("utf-8")).digest()
        whirlpool_digest = whirlpool.new((salt + password).encode("utf-8")).digest()

        return bytes(a ^ b for a, b in zip(sha512_digest, whirlpool_digest)).hex()
