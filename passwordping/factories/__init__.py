"""Factories that map identifiers to implementations."""

from passwordping.factories.hasher_factory import HASHERS, create_hasher, calc_password_hash, compute_hash

__all__ = ["HASHERS", "create_hasher", "calc_password_hash", "compute_hash"]
