# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import LoginResult, TokenClaims, User, UserChanges
from .users.exceptions import (
    AuthenticationRequiredError,
    ForbiddenError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .users.repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "AuthenticationRequiredError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "LoginResult",
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserChanges",
    "UserNotFoundError",
    "UserRepository",
]
