from __future__ import annotations

import os
import tempfile

# The engine is built from the environment at import time, so point it at a
# throwaway database before anything from userapi is imported.
_DB_DIR = tempfile.mkdtemp(prefix="userapi-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["APP_ENV"] = "test"

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402

from userapi.domain.users.entities import User  # noqa: E402
from userapi.tests.fakes import (  # noqa: E402
    DeterministicHasher,
    InMemoryUserListRepository,
    InMemoryUserRepository,
)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def lists(users: InMemoryUserRepository) -> InMemoryUserListRepository:
    return InMemoryUserListRepository(users)


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def alice(users: InMemoryUserRepository) -> User:
    return users.add(
        User(id=0, username="alice", password_hash="hashed:pw1", created_at=datetime.now(UTC))
    )
