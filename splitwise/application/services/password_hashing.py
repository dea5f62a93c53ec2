# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from splitwise.domain.users.exceptions import PasswordHashingError
from splitwise.domain.users.repositories import PasswordHasher

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt digests with a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        try:
            digest = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        except (TypeError, ValueError) as exc:
            raise PasswordHashingError() from exc
        return digest.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        # checkpw compares in constant time; a malformed stored hash is a mismatch.
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except (TypeError, ValueError):
            return False
