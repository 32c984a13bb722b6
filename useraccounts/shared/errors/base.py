# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    """Base application exception carrying structured metadata."""

    message: str
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Error raised by a use case; subclasses pin code, status and message."""

    def __init__(
        self,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        cls = type(self)
        resolved_message = message or cast(str, getattr(cls, "default_message", "Domain error"))
        resolved_code = cast(str, getattr(cls, "error_code", "domain_error"))
        resolved_status = cast(HTTPStatus, getattr(cls, "error_status", HTTPStatus.BAD_REQUEST))
        super().__init__(
            message=resolved_message,
            code=resolved_code,
            status=resolved_status,
            context=context,
        )


class AuthenticationError(DomainError):
    error_code = "unauthorized"
    error_status = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"


class AuthorizationError(DomainError):
    error_code = "forbidden"
    error_status = HTTPStatus.FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(DomainError):
    error_code = "not_found"
    error_status = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class ConflictError(DomainError):
    error_code = "conflict"
    error_status = HTTPStatus.BAD_REQUEST
    default_message = "Conflict"


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Missing or invalid fields",
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
        )
