from __future__ import annotations

import pytest

from useraccounts.application.services.token_service import JwtTokenService
from useraccounts.tests.fakes import TEST_SECRET, DeterministicHasher, InMemoryUserRepository


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def token_service() -> JwtTokenService:
    return JwtTokenService(TEST_SECRET)
