from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from splitwise.application.services.password_hashing import BcryptPasswordHasher
from splitwise.application.services.tokens import JwtTokenIssuer
from splitwise.infrastructure.db import create_engine_from_config, create_session_factory, init_db
from splitwise.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from splitwise.shared.config import DatabaseConfig

TEST_SECRET = "test-signing-key-0123456789abcdef0123456789"

_ENV_KEYS = (
    "APP_ENV",
    "DEBUG_LOGGING",
    "LOG_LEVEL",
    "LOG_FILE",
    "DATABASE_URL",
    "DATABASE_ECHO",
    "JWT_SECRET",
    "JWT_ISSUER",
    "JWT_EXPIRY_HOURS",
    "JWT_LEEWAY_SECONDS",
    "BCRYPT_ROUNDS",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keeps a developer's .env and instance/ directory out of the tests.
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = create_engine_from_config(DatabaseConfig(url="sqlite://"))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture()
def user_repository(session_factory: sessionmaker[Session]) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session_factory)


@pytest.fixture()
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture()
def token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(secret=TEST_SECRET)
