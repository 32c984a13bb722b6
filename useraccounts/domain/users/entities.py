# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    email: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class UserChanges:
    """Partial update; ``None`` leaves the field untouched."""

    username: str | None = None
    email: str | None = None
    password: str | None = None

    def is_empty(self) -> bool:
        return self.username is None and self.email is None and self.password is None


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Identity carried inside a signed token."""

    user_id: int


@dataclass(slots=True, frozen=True)
class LoginResult:

    user_id: int
    token: str
