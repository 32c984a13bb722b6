# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from useraccounts.application.use_cases.users.authorize_request import ensure_owner
from useraccounts.domain.users.entities import TokenClaims
from useraccounts.domain.users.exceptions import UserNotFoundError
from useraccounts.domain.users.repositories import UserRepository
from useraccounts.shared.logging import logger


class DeleteUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, actor: TokenClaims, user_id: int) -> None:
        ensure_owner(actor, user_id)

        if self._users.find_by_id(user_id) is None:
            raise UserNotFoundError()
        self._users.delete(user_id)
        logger.info(f"users.delete: user_id={user_id}")
