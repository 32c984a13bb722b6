# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users.authorize_request import BearerAuthorizer, extract_bearer_token
from .use_cases.users.delete_user import DeleteUserUseCase
from .use_cases.users.get_user import GetUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.update_user import UpdateUserUseCase

__all__ = [
    "BearerAuthorizer",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
    "extract_bearer_token",
]
