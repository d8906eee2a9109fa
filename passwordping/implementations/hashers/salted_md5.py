"""Forum formats built from nested, salted MD5 digests.

All three return 32 lowercase hex characters and never embed the salt
in the output.
"""

from typing import Optional
from passwordping.interfaces.password_hasher import PasswordHasher
from passwordping.implementations.hashers.digests import md5_hex


class IPBoardMyBBHasher(PasswordHasher):
    """IP.Board / MyBB: md5(md5(salt) . md5(password))."""
    
    requires_salt = True
    
    def hash(self, password: str, salt: Optional[str]) -> str:
        return md5_hex(md5_hex(salt) + md5_hex(password))


class VBulletinHasher(PasswordHasher):
    """vBulletin (before and after 3.8.5): md5(md5(password) . salt)."""
    
    requires_salt = True
    
    def hash(self, password: str, salt: Optional[str]) -> str:
        return md5_hex(md5_hex(password) + salt)


class CustomAlgorithm2Hasher(PasswordHasher):
    """md5(password . salt)."""
    
    requires_salt = True
    
    def hash(self, password: str, salt: Optional[str]) -> str:
        return md5_hex(password + salt)
