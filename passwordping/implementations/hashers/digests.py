"""Unsalted digest formats: MD5, SHA1, SHA256, SHA512 and CRC32."""

import hashlib
import zlib
from typing import Optional
from passwordping.interfaces.password_hasher import PasswordHasher


def md5_hex(value: str) -> str:
    """Lowercase hex MD5 of a UTF-8 string."""
    return hashlib.md5(value.encode("utf-8")).hexdigest()


class DigestHasher(PasswordHasher):
    """Plain hashlib digest of the password, lowercase hex. Salt is ignored."""
    
    algorithm: str = ""
    
    def hash(self, password: str, salt: Optional[str]) -> str:
        return hashlib.new(self.algorithm, password.encode("utf-8")).hexdigest()


class Md5Hasher(DigestHasher):
    algorithm = "md5"


class Sha1Hasher(DigestHasher):
    algorithm = "sha1"


class Sha256Hasher(DigestHasher):
    algorithm = "sha256"


class Sha512Hasher(DigestHasher):
    algorithm = "sha512"


class Crc32Hasher(PasswordHasher):
    """CRC-32 checksum as 8 zero-padded hex characters."""
    
    def hash(self, password: str, salt: Optional[str]) -> str:
        crc = zlib.crc32(password.encode("utf-8")) & 0xffffffff
        return f"{crc:08x}"
