# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from useraccounts.application.use_cases.users.authorize_request import ensure_owner
from useraccounts.domain.users.entities import TokenClaims, User, UserChanges
from useraccounts.domain.users.exceptions import UserNotFoundError
from useraccounts.domain.users.repositories import PasswordHasher, UserRepository
from useraccounts.shared.logging import logger


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, actor: TokenClaims, user_id: int, changes: UserChanges) -> User:
        ensure_owner(actor, user_id)

        current = self._users.find_by_id(user_id)
        if current is None:
            raise UserNotFoundError()
        if changes.is_empty():
            return current

        password_hash = None
        if changes.password is not None:
            password_hash = self._password_hasher.hash(changes.password)

        updated = self._users.update(
            user_id,
            username=changes.username,
            email=changes.email,
            password_hash=password_hash,
        )
        changed = [
            name
            for name, value in (
                ("username", changes.username),
                ("email", changes.email),
                ("password", changes.password),
            )
            if value is not None
        ]
        logger.info(f"users.update: user_id={user_id} fields={changed}")
        return updated
