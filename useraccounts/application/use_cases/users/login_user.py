# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from useraccounts.domain.users.entities import LoginResult, TokenClaims
from useraccounts.domain.users.exceptions import InvalidCredentialsError
from useraccounts.domain.users.repositories import (
    PasswordHasher,
    TokenService,
    UserRepository,
)
from useraccounts.shared.logging import logger

_DUMMY_PASSWORD = "not-a-real-password"


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        # computed once; unknown usernames are verified against it
        self._dummy_hash = password_hasher.hash(_DUMMY_PASSWORD)

    def _burn_password_check(self, password: str) -> None:
        self._password_hasher.verify(password, self._dummy_hash)

    def execute(self, username: str, password: str) -> LoginResult:
        user = self._users.find_by_username(username)
        if user is None:
            self._burn_password_check(password)
            logger.info("users.login: rejected")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("users.login: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(TokenClaims(user_id=user.id))
        logger.info(f"users.login: ok user_id={user.id}")
        return LoginResult(user_id=user.id, token=token)
