# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded bearer tokens."""

from __future__ import annotations

import time
from collections.abc import Callable

import jwt
from pydantic import BaseModel, StrictInt
from pydantic import ValidationError as PydanticValidationError

from useraccounts.domain.users.entities import TokenClaims
from useraccounts.domain.users.repositories import TokenService
from useraccounts.shared.logging import logger

SUPPORTED_ALGORITHMS = ("HS256", "HS384", "HS512")
DEFAULT_TTL_SECONDS = 3600


class _TokenData(BaseModel):
    user_id: StrictInt


class _TokenEnvelope(BaseModel):
    iat: StrictInt
    exp: StrictInt
    data: _TokenData


class JwtTokenService(TokenService):
    """Issue and verify JWTs carrying ``{iat, exp, data: {user_id}}``.

    Verification never raises: every structural, signature or expiry failure
    collapses to ``None`` so callers treat it as "unauthenticated".
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        leeway_seconds: int = 0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("Token secret key must not be empty")
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported token algorithm: {algorithm}")
        if ttl_seconds <= 0:
            raise ValueError("Token TTL must be positive")
        if leeway_seconds < 0:
            raise ValueError("Token leeway must not be negative")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl_seconds = ttl_seconds
        self._leeway_seconds = leeway_seconds
        self._clock = clock

    def __repr__(self) -> str:
        return f"JwtTokenService(algorithm={self._algorithm!r}, ttl_seconds={self._ttl_seconds})"

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, claims: TokenClaims) -> str:
        issued_at = int(self._clock())
        envelope = _TokenEnvelope(
            iat=issued_at,
            exp=issued_at + self._ttl_seconds,
            data=_TokenData(user_id=claims.user_id),
        )
        token = jwt.encode(envelope.model_dump(), self._secret_key, algorithm=self._algorithm)
        logger.debug(f"token.issue: user_id={claims.user_id} exp={envelope.exp}")
        return token

    def verify(self, token: str) -> TokenClaims | None:
        if not token:
            return None
        try:
            decoded = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                leeway=self._leeway_seconds,
                options={"require": ["exp", "iat"]},
            )
            envelope = _TokenEnvelope.model_validate(decoded)
        except jwt.ExpiredSignatureError:
            logger.debug("token.verify: expired")
            return None
        except jwt.InvalidTokenError as exc:
            logger.debug(f"token.verify: invalid ({type(exc).__name__})")
            return None
        except PydanticValidationError:
            logger.debug("token.verify: unexpected payload shape")
            return None

        return TokenClaims(user_id=envelope.data.user_id)


__all__ = ["DEFAULT_TTL_SECONDS", "JwtTokenService", "SUPPORTED_ALGORITHMS"]
