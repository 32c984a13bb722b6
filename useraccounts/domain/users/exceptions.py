# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from useraccounts.shared.errors.base import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
)


class UserAlreadyExistsError(ConflictError):
    error_code = "user_already_exists"
    default_message = "User already exists"


class InvalidCredentialsError(AuthenticationError):
    error_code = "invalid_credentials"
    default_message = "Invalid credentials"


class AuthenticationRequiredError(AuthenticationError):
    error_code = "unauthorized"
    default_message = "Unauthorized"


class ForbiddenError(AuthorizationError):
    error_code = "forbidden"
    default_message = "Forbidden"


class UserNotFoundError(NotFoundError):
    error_code = "user_not_found"
    default_message = "User not found"
