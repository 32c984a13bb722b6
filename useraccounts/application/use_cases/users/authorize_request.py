# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token authentication followed by an ownership check."""

from __future__ import annotations

import re

from useraccounts.domain.users.entities import TokenClaims
from useraccounts.domain.users.exceptions import AuthenticationRequiredError, ForbiddenError
from useraccounts.domain.users.repositories import TokenService
from useraccounts.shared.logging import logger

_BEARER_RE = re.compile(r"Bearer\s(\S+)")


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    match = _BEARER_RE.search(authorization)
    if match is None:
        return None
    return match.group(1)


def ensure_owner(actor: TokenClaims, target_user_id: int) -> None:
    if actor.user_id != target_user_id:
        logger.warning(
            f"auth.ownership: user_id={actor.user_id} denied on user_id={target_user_id}"
        )
        raise ForbiddenError()


class BearerAuthorizer:
    """Resolve the caller from an ``Authorization`` header.

    Checks run in order and stop at the first failure:
    missing/malformed header or unverifiable token (401), then a
    caller acting on someone else's record (403).
    """

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, authorization: str | None) -> TokenClaims:
        token = extract_bearer_token(authorization)
        if token is None:
            raise AuthenticationRequiredError()
        claims = self._tokens.verify(token)
        if claims is None:
            raise AuthenticationRequiredError()
        return claims

    def authorize(self, authorization: str | None, target_user_id: int) -> TokenClaims:
        claims = self.authenticate(authorization)
        ensure_owner(claims, target_user_id)
        return claims
