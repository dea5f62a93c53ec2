# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from splitwise.application.services.password_hashing import BcryptPasswordHasher
from splitwise.application.services.tokens import JwtTokenIssuer
from splitwise.application.use_cases.users.authenticate_token import AuthenticateTokenUseCase
from splitwise.application.use_cases.users.login_user import LoginUserUseCase
from splitwise.application.use_cases.users.register_user import RegisterUserUseCase
from splitwise.infrastructure.db import create_engine_from_config, create_session_factory, init_db
from splitwise.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from splitwise.shared.config import AppConfig, load_config
from splitwise.shared.logging import setup_logging


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def engine(self) -> Engine:
        return create_engine_from_config(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    def init_logging(self) -> None:
        setup_logging(self.config.effective_log_level)

    def init_db(self) -> None:
        init_db(self.engine)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.auth.bcrypt_rounds)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        auth = self.config.auth
        return JwtTokenIssuer(
            secret=auth.jwt_secret,
            issuer=auth.jwt_issuer,
            ttl=timedelta(hours=auth.token_ttl_hours),
            leeway=timedelta(seconds=auth.leeway_seconds),
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def authenticate_token_use_case(self) -> AuthenticateTokenUseCase:
        return AuthenticateTokenUseCase(tokens=self.token_issuer)
