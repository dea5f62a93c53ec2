from __future__ import annotations

import sys
from datetime import timedelta

import pytest
from loguru import logger as loguru_logger

from splitwise.application.use_cases.users.register_user import SignUpParams
from splitwise.container import Container
from splitwise.domain.users.exceptions import UserAlreadyExistsError
from splitwise.shared.config import AppConfig, AuthConfig, DatabaseConfig
from splitwise.shared.logging import logger


@pytest.fixture()
def container() -> Container:
    config = AppConfig(
        database=DatabaseConfig(url="sqlite://"),
        auth=AuthConfig(jwt_secret="container-signing-key-0123456789abcdef", bcrypt_rounds=4),
    )
    container = Container(config)
    container.init_db()
    yield container
    container.engine.dispose()


def test_container_wires_configuration(container: Container) -> None:
    assert container.password_hasher.rounds == 4
    assert container.token_issuer.ttl == timedelta(hours=24)
    assert container.register_user_use_case is container.register_user_use_case


def test_signup_login_and_authenticate(container: Container) -> None:
    params = SignUpParams(
        first_name="first", last_name="last", email="a@x.com", password="pw12345678"
    )

    user = container.register_user_use_case.execute(params)
    with pytest.raises(UserAlreadyExistsError):
        container.register_user_use_case.execute(params)

    session = container.login_user_use_case.execute("a@x.com", "pw12345678")
    claims = container.authenticate_token_use_case.execute(f"Bearer {session.token}")

    assert claims.user_id == user.id
    assert claims.issuer == "splitwise-clone"


def test_init_logging_uses_configured_level(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    log_file = tmp_path / "app.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    container = Container(AppConfig(debug_logging=True, log_level="ERROR"))

    try:
        container.init_logging()
        logger.debug("container debug line")
    finally:
        loguru_logger.remove()
        loguru_logger.add(sys.stderr)

    assert "container debug line" in log_file.read_text(encoding="utf-8")
