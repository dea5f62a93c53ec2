# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import exists, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from splitwise.domain.users.entities import NewUser
from splitwise.domain.users.entities import User as DomainUser
from splitwise.domain.users.exceptions import ConstraintViolationError, StorageError
from splitwise.domain.users.repositories import UserRepository
from splitwise.infrastructure.db.models import User
from splitwise.infrastructure.unit_of_work import unit_of_work_scope
from splitwise.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
        updated_at=row.updated_at,
        date_of_birth=row.date_of_birth,
        phone_number=row.phone_number,
        deleted_at=row.deleted_at,
    )


_UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "pgcode", None) == _UNIQUE_VIOLATION_SQLSTATE:
        return True
    if getattr(orig, "sqlstate", None) == _UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "unique" in str(orig).lower()


def _violated_field(exc: IntegrityError) -> str | None:
    # NOT NULL, CHECK and foreign-key failures name a column too, but they
    # say nothing about duplicates.
    if not _is_unique_violation(exc):
        return None
    message = str(exc.orig).lower()
    if "email" in message:
        return "email"
    if "phone" in message:
        return "phone_number"
    return None


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        field = _violated_field(exc)
        logger.warning(f"users.{operation}: constraint violation field={field}")
        raise ConstraintViolationError(field) from exc
    except SQLAlchemyError as exc:
        logger.error(f"users.{operation}: storage failure {type(exc).__name__}")
        raise StorageError() from exc


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def create(self, new_user: NewUser) -> DomainUser:
        with _storage_errors("create"), unit_of_work_scope(self._session_factory) as session:
            row = User(
                first_name=new_user.first_name,
                last_name=new_user.last_name,
                date_of_birth=new_user.date_of_birth,
                email=new_user.email,
                password_hash=new_user.password_hash,
                phone_number=new_user.phone_number,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            user = _to_domain(row)
        logger.debug(f"users.create: inserted user_id={user.id}")
        return user

    def find_by_email(self, email: str) -> DomainUser | None:
        with _storage_errors("find_by_email"), unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(User).where(User.email == email, User.deleted_at.is_(None))
            ).first()
            return _to_domain(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        with _storage_errors("exists_by_email"), unit_of_work_scope(self._session_factory) as session:
            found = session.scalar(
                select(exists().where(User.email == email, User.deleted_at.is_(None)))
            )
            return bool(found)

    def find_by_id(self, user_id: UUID) -> DomainUser | None:
        with _storage_errors("find_by_id"), unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(User).where(User.id == user_id, User.deleted_at.is_(None))
            ).first()
            return _to_domain(row) if row else None

    def soft_delete(self, user_id: UUID) -> bool:
        with _storage_errors("soft_delete"), unit_of_work_scope(self._session_factory) as session:
            result = session.execute(
                update(User)
                .where(User.id == user_id, User.deleted_at.is_(None))
                .values(deleted_at=datetime.now(UTC))
            )
            deleted = bool(result.rowcount)
        logger.info(f"users.soft_delete: user_id={user_id} deleted={deleted}")
        return deleted
