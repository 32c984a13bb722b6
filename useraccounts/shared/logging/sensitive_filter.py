# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before it reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

_RULES: list[tuple[re.Pattern[str], str]] = [
    # signing keys: JWT_SECRET=..., secret_key: "..."
    (
        re.compile(r"((?:jwt[_-]?)?secret(?:[_-]?key)?\s*[:=]\s*['\"]?)([^\s'\"]{4,})", re.I),
        rf"\1{_REDACTED}",
    ),
    # whole tokens before the generic header rules see them
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]*"), "***JWT***"),
    (re.compile(r"(bearer\s+)([\w.~+/-]{16,}=*)", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"\n]{10,})", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(token\s*[:=]\s*['\"]?)([\w.-]{16,})"), rf"\1{_REDACTED}"),
    # password and password_hash, as key=value or JSON-ish key: value
    (
        re.compile(r"(password(?:_hash)?['\"]?\s*[:=]\s*['\"]?)([^'\"\s,}]+)", re.I),
        rf"\1{_REDACTED}",
    ),
    # credentials embedded in a database URL
    (re.compile(r"(\w+(?:\+\w+)?://[^:/@\s]+:)([^@\s]+)(@)"), rf"\1{_REDACTED}\3"),
    # keep the domain of an email, drop the mailbox
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: rewrite the message in place and always let it through."""

    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
