# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from useraccounts.domain.users.entities import User
from useraccounts.domain.users.exceptions import UserAlreadyExistsError
from useraccounts.domain.users.repositories import PasswordHasher, UserRepository
from useraccounts.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, email: str) -> User:
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        # the store re-checks uniqueness inside its own transaction
        user = self._users.add(username, hashed, email)
        logger.info(f"users.register: created user_id={user.id}")
        return user
