# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from uuid import UUID


@dataclass(slots=True, frozen=True)
class User:
    """Registered account as returned by the user store.

    ``password_hash`` stays inside the process: it is hidden from ``repr`` and
    left out of :meth:`to_public_dict`.
    """

    id: UUID
    first_name: str
    last_name: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime
    updated_at: datetime
    date_of_birth: date | None = None
    phone_number: str | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_public_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "phone_number": self.phone_number,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class NewUser:
    first_name: str
    last_name: str
    email: str
    password_hash: str = field(repr=False)
    date_of_birth: date | None = None
    phone_number: str | None = None


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: UUID
    token: str = field(repr=False)
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:

    user_id: UUID
    issuer: str
    issued_at: datetime
    not_before: datetime
    expires_at: datetime
