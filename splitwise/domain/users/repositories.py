# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from .entities import NewUser, SessionToken, TokenClaims, User


class UserRepository(Protocol):
    """User store contract.

    ``create`` must enforce email/phone uniqueness among live rows atomically
    and raise ``ConstraintViolationError`` on a duplicate; every other
    persistence fault is a ``StorageError``. Soft-deleted rows are invisible
    to all three operations.
    """

    def create(self, new_user: NewUser) -> User: ...
    def find_by_email(self, email: str) -> User | None: ...
    def exists_by_email(self, email: str) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user_id: UUID) -> SessionToken: ...
    def decode(self, token: str) -> TokenClaims: ...
