"""Shared test fixtures for jwtcore."""

import time

import pytest

from jwtcore.crypto.keys import generate_rsa_keypair
from jwtcore.crypto.types import SigningKeyData


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep JWT_* settings from the host environment out of tests."""
    for name in ("JWT_LEEWAY", "JWT_ACCESS_TOKEN_TTL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_keypair() -> SigningKeyData:
    """An RSA-2048 keypair shared by the whole session."""
    return generate_rsa_keypair()


@pytest.fixture(scope="session")
def other_rsa_keypair() -> SigningKeyData:
    """A second, unrelated RSA keypair."""
    return generate_rsa_keypair()


@pytest.fixture
def now() -> int:
    """A fixed current time for time-claim tests."""
    return int(time.time())
