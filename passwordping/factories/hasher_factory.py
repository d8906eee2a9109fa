"""Factory for creating password hasher instances."""

from typing import Optional, Union
from passwordping.interfaces.password_hasher import PasswordHasher
from passwordping.implementations.hashers import (
    Md5Hasher,
    Sha1Hasher,
    Sha256Hasher,
    Sha512Hasher,
    Crc32Hasher,
    IPBoardMyBBHasher,
    VBulletinHasher,
    CustomAlgorithm2Hasher,
    Md5CryptHasher,
    Phpbb3Hasher,
    BCryptHasher,
    CustomAlgorithm4Hasher,
    CustomAlgorithm1Hasher,
)
from passwordping.domain.consts import PasswordType
from passwordping.domain.errors import UnsupportedPasswordTypeError
from passwordping.domain.models import HashRequest


HASHERS: dict[PasswordType, type[PasswordHasher]] = {
    PasswordType.MD5: Md5Hasher,
    PasswordType.SHA1: Sha1Hasher,
    PasswordType.SHA256: Sha256Hasher,
    PasswordType.SHA512: Sha512Hasher,
    PasswordType.CRC32: Crc32Hasher,
    PasswordType.IPBoard_MyBB: IPBoardMyBBHasher,
    PasswordType.VBulletinPre3_8_5: VBulletinHasher,
    PasswordType.VBulletinPost3_8_5: VBulletinHasher,
    PasswordType.CustomAlgorithm2: CustomAlgorithm2Hasher,
    PasswordType.MD5Crypt: Md5CryptHasher,
    PasswordType.PHPBB3: Phpbb3Hasher,
    PasswordType.BCrypt: BCryptHasher,
    PasswordType.CustomAlgorithm4: CustomAlgorithm4Hasher,
    PasswordType.CustomAlgorithm1: CustomAlgorithm1Hasher,
}


def create_hasher(password_type: Union[PasswordType, int]) -> PasswordHasher:
    """Factory for creating password hashers.
    
    Accepts a PasswordType member or the raw number the API uses.
        
    Returns:
        PasswordHasher instance
        
    Raises:
        UnsupportedPasswordTypeError: If password_type is unknown
    """
    try:
        hasher_cls = HASHERS[PasswordType(password_type)]
    except (ValueError, KeyError):
        raise UnsupportedPasswordTypeError(f"Unsupported password type: {password_type}")
    return hasher_cls()


def calc_password_hash(
    password_type: Union[PasswordType, int],
    password: str,
    salt: Optional[str] = None,
) -> str:
    """Compute `password` in the given hash format.
    
    Raises:
        InvalidSaltError: If the format needs a salt and it is missing or malformed
        UnsupportedPasswordTypeError: If the format cannot be computed
    """
    return create_hasher(password_type).compute(password, salt)


def compute_hash(request: HashRequest) -> str:
    """Compute the hash described by a HashRequest."""
    return calc_password_hash(request.password_type, request.password, request.salt)
