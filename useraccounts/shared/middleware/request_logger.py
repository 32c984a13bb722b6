# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from useraccounts.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

_MASKED_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization"})


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    # stable across requests so the same bearer token can be correlated
    return "sha256:" + hashlib.sha256(value.encode()).hexdigest()[:8]


def _masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _MASKED_HEADERS else value
        for name, value in headers.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8)
        set_correlation_id(request_id)
        g.correlation_id = request_id
        g.request_started = time.perf_counter()

        if debug_mode:
            logger.debug(
                f"--> {request.method} {request.path} ip={client_ip()} "
                f"headers={_masked_headers(request.headers)} "
                f"bytes={request.content_length or 0}"
            )

    @app.after_request
    def _finish(response: Response) -> Response:
        started = g.get("request_started", time.perf_counter())
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"<-- {request.method} {request.path} {response.status_code} "
            f"{elapsed_ms:.1f}ms ip={client_ip()} user={g.get('user_id')}"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("correlation_id", "-"))
        return response

    @app.teardown_request
    def _reset(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging"]
