"""Credential hash derivation for account and password lookups.

The service never receives a plaintext password. For a password check it
gets plain MD5/SHA1/SHA256 digests; for a credentials check it gets, per
password hash the account requires, an argon2d hash of
``lower(username) + "$" + password_hash`` salted with the account salt.
"""

import logging
from typing import List, Optional
from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw
from passwordping.config.config import config
from passwordping.domain.consts import (
    ApiParams,
    Argon2Params,
    BCRYPT_PASSWORD_TYPES,
    HashDisplay,
    PasswordType,
)
from passwordping.domain.errors import ValidationError
from passwordping.domain.models import AccountResponse, PasswordHashSpecification
from passwordping.factories.hasher_factory import calc_password_hash

logger = logging.getLogger(__name__)


def calc_password_lookup_hashes(password: str) -> dict[str, str]:
    """Return the digests sent to the passwords endpoint, keyed by query parameter."""
    return {
        ApiParams.MD5: calc_password_hash(PasswordType.MD5, password),
        ApiParams.SHA1: calc_password_hash(PasswordType.SHA1, password),
        ApiParams.SHA256: calc_password_hash(PasswordType.SHA256, password),
    }


def calc_argon2(value: str, salt: str) -> str:
    """Raw argon2d hash of `value` as lowercase hex.
    
    Raises:
        ValidationError: If argon2 rejects the input (e.g. salt shorter than 8 bytes)
    """
    try:
        raw = hash_secret_raw(
            secret=value.encode("utf-8"),
            salt=salt.encode("utf-8"),
            time_cost=Argon2Params.TIME_COST,
            memory_cost=Argon2Params.MEMORY_COST,
            parallelism=Argon2Params.PARALLELISM,
            hash_len=Argon2Params.HASH_LENGTH,
            type=Type.D,
        )
    except HashingError as e:
        raise ValidationError(f"argon2 hashing failed: {e}") from e
    return raw.hex()


def calc_credential_hash(
    username: str,
    password: str,
    account_salt: str,
    spec: PasswordHashSpecification,
) -> Optional[str]:
    """Credential hash for one required password hash.
    
    Returns:
        Hex credential hash, or None if this library cannot compute the
        password hash the spec asks for.
    """
    try:
        password_hash = calc_password_hash(spec.hash_type, password, spec.salt)
    except ValidationError as e:
        logger.debug(f"Skipping password hash type {spec.hash_type}: {e}")
        return None
    
    return calc_argon2(f"{username.lower()}${password_hash}", account_salt)


def calc_credential_hashes(username: str, password: str, account: AccountResponse) -> List[str]:
    """Credential hashes for every password hash an account requires.
    
    Unsupported hash types are skipped, and only the first
    config.MAX_BCRYPT_HASHES bcrypt-based specs are computed.
    """
    credential_hashes = []
    bcrypt_count = 0
    
    for spec in account.password_hashes_required:
        if spec.hash_type in BCRYPT_PASSWORD_TYPES:
            if bcrypt_count >= config.MAX_BCRYPT_HASHES:
                logger.debug(f"Skipping bcrypt hash type {spec.hash_type}: limit reached")
                continue
            bcrypt_count += 1
        
        credential_hash = calc_credential_hash(username, password, account.salt, spec)
        if credential_hash is not None:
            logger.debug(
                f"Credential hash for type {spec.hash_type}: "
                f"{credential_hash[:HashDisplay.PREFIX_LENGTH]}..."
            )
            credential_hashes.append(credential_hash)
    
    return credential_hashes
