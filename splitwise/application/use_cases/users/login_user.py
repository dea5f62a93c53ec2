# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from splitwise.domain.users.entities import SessionToken
from splitwise.domain.users.exceptions import InvalidPasswordError, UserNotFoundError
from splitwise.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from splitwise.shared.logging import logger

_DUMMY_PASSWORD = "splitwise-dummy-password"


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens
        # Verified against on unknown emails so both failure paths cost one hash check.
        self._dummy_hash = password_hasher.hash(_DUMMY_PASSWORD)

    def execute(self, email: str, password: str) -> SessionToken:
        logger.debug(f"auth.login: start email={email}")

        user = self._users.find_by_email(email)
        if user is None:
            self._password_hasher.verify(password, self._dummy_hash)
            logger.warning(f"auth.login: unknown email email={email}")
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning(f"auth.login: password mismatch user_id={user.id}")
            raise InvalidPasswordError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id} expires_at={token.expires_at.isoformat()}")
        return token
