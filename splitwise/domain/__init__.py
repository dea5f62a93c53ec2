# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import NewUser, SessionToken, TokenClaims, User
from .users.exceptions import (
    ConstraintViolationError,
    InvalidCredentialsError,
    InvalidPasswordError,
    InvalidTokenError,
    PasswordHashingError,
    StorageError,
    TokenGenerationError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "NewUser",
    "SessionToken",
    "TokenClaims",
    "User",
    "ConstraintViolationError",
    "InvalidCredentialsError",
    "InvalidPasswordError",
    "InvalidTokenError",
    "PasswordHashingError",
    "StorageError",
    "TokenGenerationError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
