# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Security audit trail for account events.

Events go to the regular log stream, bound with ``audit=True`` so a sink can
route them separately. Nothing is persisted.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from useraccounts.shared.logging import logger


class AuditAction(str, Enum):
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    ACCOUNT_UPDATED = "account_updated"
    ACCOUNT_DELETED = "account_deleted"
    ACCESS_DENIED = "access_denied"


# substrings; "password_hash" and "new_password" both match
_REDACTED_KEYS = ("password", "token", "secret", "hash")


def _redact(details: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: "***REDACTED***" if any(marker in key.lower() for marker in _REDACTED_KEYS) else value
        for key, value in details.items()
    }


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: Mapping[str, Any] | None = None,
    success: bool = True,
) -> None:
    fields = _redact(details or {})
    summary = " ".join(f"{key}={value}" for key, value in fields.items())

    event = logger.bind(audit=True, action=action.value, actor_id=user_id)
    event.log(
        "INFO" if success else "WARNING",
        f"audit {action.value} user={user_id} ip={ip_address} ok={success}"
        + (f" {summary}" if summary else ""),
    )


__all__ = ["AuditAction", "audit_log"]
