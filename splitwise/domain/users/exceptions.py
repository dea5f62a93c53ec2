# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from splitwise.shared.errors.base import DomainError, InfrastructureError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    """Login failure as seen from outside.

    Subclasses keep the internal reason but render the same public payload,
    so callers cannot tell an unknown email from a wrong password.
    """

    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    reason = "invalid_credentials"


class UserNotFoundError(InvalidCredentialsError):
    reason = "user_not_found"


class InvalidPasswordError(InvalidCredentialsError):
    reason = "invalid_password"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED


class TokenGenerationError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("token_generation_failed")


class PasswordHashingError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("password_hashing_failed")


class StorageError(InfrastructureError):
    def __init__(self, code: str = "storage_error", *, field: str | None = None) -> None:
        super().__init__(code, context={"field": field} if field else None)
        self.field = field


class ConstraintViolationError(StorageError):
    def __init__(self, field: str | None = None) -> None:
        super().__init__("constraint_violation", field=field)
