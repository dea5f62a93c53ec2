# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from splitwise.domain.users.entities import NewUser, User
from splitwise.domain.users.exceptions import ConstraintViolationError, UserAlreadyExistsError
from splitwise.domain.users.repositories import PasswordHasher, UserRepository
from splitwise.shared.logging import logger


@dataclass(slots=True, frozen=True)
class SignUpParams:
    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)
    date_of_birth: date | None = None
    phone_number: str | None = None


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, params: SignUpParams) -> User:
        logger.debug(f"auth.signup: start email={params.email}")

        if self._users.exists_by_email(params.email):
            logger.warning(f"auth.signup: email already registered email={params.email}")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(params.password)
        new_user = NewUser(
            first_name=params.first_name,
            last_name=params.last_name,
            email=params.email,
            password_hash=hashed,
            date_of_birth=params.date_of_birth,
            phone_number=params.phone_number,
        )

        try:
            user = self._users.create(new_user)
        except ConstraintViolationError as exc:
            # The pre-check above can lose a race; the store constraint decides.
            if exc.field != "email":
                raise
            logger.warning(
                f"auth.signup: email taken by concurrent signup email={params.email}"
            )
            raise UserAlreadyExistsError() from exc

        logger.info(f"auth.signup: ok user_id={user.id}")
        return user
