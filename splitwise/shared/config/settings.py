# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_JWT_SECRET = "dev-secret-key-change-in-production"

_INSECURE_SECRETS = frozenset({DEV_JWT_SECRET, "dev", "development", "test", "secret", ""})

# HS256 keys shorter than the digest size are brute-forceable.
MIN_PRODUCTION_SECRET_BYTES = 32

_SETTINGS = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///splitwise.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    echo: bool = Field(False, alias="DATABASE_ECHO")

    model_config = _SETTINGS


class AuthConfig(BaseSettings):
    # Signing key and work factor are read once and injected into the
    # hasher / token issuer; nothing reads them from the environment later.
    jwt_secret: str = Field(DEV_JWT_SECRET, alias="JWT_SECRET")
    jwt_issuer: str = Field("splitwise-clone", min_length=1, alias="JWT_ISSUER")
    token_ttl_hours: int = Field(24, ge=1, alias="JWT_EXPIRY_HOURS")
    leeway_seconds: int = Field(0, ge=0, alias="JWT_LEEWAY_SECONDS")
    bcrypt_rounds: int = Field(12, ge=4, le=31, alias="BCRYPT_ROUNDS")

    model_config = _SETTINGS

    def uses_insecure_secret(self) -> bool:
        return self.jwt_secret.strip().lower() in _INSECURE_SECRETS

    def secret_too_short(self) -> bool:
        return len(self.jwt_secret.encode("utf-8")) < MIN_PRODUCTION_SECRET_BYTES


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.auth.uses_insecure_secret():
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   The development fallback key must never sign production tokens.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if self.auth.secret_too_short():
            print(
                "\n❌ CRITICAL SECURITY ERROR: JWT_SECRET is too short for production!\n"
                f"   HS256 needs at least {MIN_PRODUCTION_SECRET_BYTES} bytes of key material.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if self.auth.bcrypt_rounds < 12:
            print(
                f"\n⚠️  PRODUCTION SECURITY WARNING: BCRYPT_ROUNDS={self.auth.bcrypt_rounds} "
                "is below the recommended work factor of 12.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_logging else self.log_level


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "DEV_JWT_SECRET",
    "MIN_PRODUCTION_SECRET_BYTES",
    "load_config",
]
