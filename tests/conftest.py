"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from passwordping.infrastructure.api_client import PasswordPing

# Cost 04 keeps bcrypt-based tests fast
FAST_BCRYPT_SALT = "$2a$04$2bULeXwv2H34SXkT1giCZe"
ACCOUNT_SALT = "5a8c2b1e9f3d4c7a"


@pytest.fixture
def fast_bcrypt_salt():
    """bcrypt setting with the lowest cost bcrypt accepts."""
    return FAST_BCRYPT_SALT


@pytest.fixture
def account_salt():
    """argon2 salt as the accounts endpoint would return it."""
    return ACCOUNT_SALT


@pytest_asyncio.fixture
async def api_client():
    """Client pointed at the default host, for use with respx mocks."""
    async with PasswordPing("test-api-key", "test-secret") as client:
        yield client
