"""Services built on top of the hash engine."""

from passwordping.services.credential_hashing import (
    calc_argon2,
    calc_credential_hash,
    calc_credential_hashes,
    calc_password_lookup_hashes,
)

__all__ = [
    "calc_argon2",
    "calc_credential_hash",
    "calc_credential_hashes",
    "calc_password_lookup_hashes",
]
