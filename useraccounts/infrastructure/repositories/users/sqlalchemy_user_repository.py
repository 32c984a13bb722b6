# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from useraccounts.domain.users.entities import User as DomainUser
from useraccounts.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from useraccounts.domain.users.repositories import UserRepository
from useraccounts.infrastructure.db.models import User
from useraccounts.infrastructure.unit_of_work import unit_of_work_scope
from useraccounts.shared.logging import logger


# SQLite INTEGER primary keys are signed 64-bit; larger ids overflow the driver
_MAX_ROW_ID = 2**63 - 1


def _is_storable_id(user_id: int) -> bool:
    return 0 < user_id <= _MAX_ROW_ID


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        email=row.email,
        created_at=created_at,
    )


def _username_taken(session: Session, username: str, *, exclude_id: int | None = None) -> bool:
    stmt = select(User.id).where(User.username == username)
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return session.execute(stmt.limit(1)).first() is not None


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def add(self, username: str, password_hash: str, email: str) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            if _username_taken(session, username):
                raise UserAlreadyExistsError()
            row = User(
                username=username,
                password_hash=password_hash,
                email=email,
                created_at=datetime.now(UTC),
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                logger.info("users.repo: unique constraint rejected concurrent insert")
                raise UserAlreadyExistsError() from exc
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> DomainUser | None:
        if not _is_storable_id(user_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            if not row:
                return None
            return _to_domain(row)

    def update(
        self,
        user_id: int,
        *,
        username: str | None = None,
        email: str | None = None,
        password_hash: str | None = None,
    ) -> DomainUser:
        if not _is_storable_id(user_id):
            raise UserNotFoundError()
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if not row:
                raise UserNotFoundError()
            if username is not None and username != row.username:
                if _username_taken(session, username, exclude_id=user_id):
                    raise UserAlreadyExistsError()
                row.username = username
            if email is not None:
                row.email = email
            if password_hash is not None:
                row.password_hash = password_hash
            try:
                session.flush()
            except IntegrityError as exc:
                raise UserAlreadyExistsError() from exc
            return _to_domain(row)

    def delete(self, user_id: int) -> None:
        if not _is_storable_id(user_id):
            raise UserNotFoundError()
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if not row:
                raise UserNotFoundError()
            session.delete(row)
