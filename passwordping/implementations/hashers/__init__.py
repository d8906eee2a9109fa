"""Password hasher implementations.

This package contains one concrete hasher per supported hash format.
"""

from passwordping.implementations.hashers.digests import (
    Md5Hasher,
    Sha1Hasher,
    Sha256Hasher,
    Sha512Hasher,
    Crc32Hasher,
)
from passwordping.implementations.hashers.salted_md5 import (
    IPBoardMyBBHasher,
    VBulletinHasher,
    CustomAlgorithm2Hasher,
)
from passwordping.implementations.hashers.crypt_formats import Md5CryptHasher, Phpbb3Hasher
from passwordping.implementations.hashers.bcrypt_formats import BCryptHasher, CustomAlgorithm4Hasher
from passwordping.implementations.hashers.custom_algorithm1 import CustomAlgorithm1Hasher

__all__ = [
    "Md5Hasher",
    "Sha1Hasher",
    "Sha256Hasher",
    "Sha512Hasher",
    "Crc32Hasher",
    "IPBoardMyBBHasher",
    "VBulletinHasher",
    "CustomAlgorithm2Hasher",
    "Md5CryptHasher",
    "Phpbb3Hasher",
    "BCryptHasher",
    "CustomAlgorithm4Hasher",
    "CustomAlgorithm1Hasher",
]
