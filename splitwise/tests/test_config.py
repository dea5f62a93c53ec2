from __future__ import annotations

import pytest
from pydantic import ValidationError

from splitwise.shared.config import DEV_JWT_SECRET, AppConfig, AuthConfig, DatabaseConfig


def test_defaults() -> None:
    config = AppConfig()

    assert config.is_production() is False
    assert config.database.url == "sqlite:///splitwise.db"
    assert config.auth.jwt_secret == DEV_JWT_SECRET
    assert config.auth.jwt_issuer == "splitwise-clone"
    assert config.auth.token_ttl_hours == 24
    assert config.auth.bcrypt_rounds == 12
    assert config.auth.uses_insecure_secret() is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://app@db/splitwise")
    monkeypatch.setenv("JWT_SECRET", "a-long-random-secret-value-for-tests")
    monkeypatch.setenv("JWT_EXPIRY_HOURS", "12")
    monkeypatch.setenv("BCRYPT_ROUNDS", "10")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")

    config = AppConfig()

    assert config.database.url == "postgresql+psycopg://app@db/splitwise"
    assert config.auth.jwt_secret == "a-long-random-secret-value-for-tests"
    assert config.auth.token_ttl_hours == 12
    assert config.auth.bcrypt_rounds == 10
    assert config.auth.uses_insecure_secret() is False
    assert config.debug_logging is True


def test_dotenv_file_is_read(tmp_path) -> None:
    (tmp_path / ".env").write_text("JWT_ISSUER=splitwise-staging\nUNRELATED=1\n", encoding="utf-8")

    assert AuthConfig().jwt_issuer == "splitwise-staging"


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_bounds(rounds: int) -> None:
    with pytest.raises(ValidationError):
        AuthConfig(bcrypt_rounds=rounds)


def test_production_refuses_fallback_secret(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        AppConfig(app_env="production")

    assert exc_info.value.code == 1
    assert "JWT_SECRET" in capsys.readouterr().err


def test_production_accepts_real_secret() -> None:
    config = AppConfig(
        app_env="prod",
        auth=AuthConfig(jwt_secret="a-long-random-secret-value-for-tests"),
        database=DatabaseConfig(url="sqlite://"),
    )

    assert config.is_production() is True


def test_production_refuses_short_secret(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        AppConfig(app_env="production", auth=AuthConfig(jwt_secret="s3cr3"))

    assert exc_info.value.code == 1
    assert "too short" in capsys.readouterr().err


def test_short_secret_is_allowed_outside_production() -> None:
    config = AppConfig(auth=AuthConfig(jwt_secret="s3cr3"))

    assert config.auth.secret_too_short() is True
    assert config.is_production() is False


def test_effective_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert AppConfig().effective_log_level == "INFO"

    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert AppConfig().effective_log_level == "WARNING"

    monkeypatch.setenv("DEBUG_LOGGING", "true")
    assert AppConfig().effective_log_level == "DEBUG"
