from __future__ import annotations

from collections.abc import Iterator

import pytest

from useraccounts.shared.logging import (
    clear_correlation_id,
    logger,
    sanitize_record,
    set_correlation_id,
)


@pytest.fixture()
def captured() -> Iterator[list[dict]]:
    records: list[dict] = []
    sink_id = logger.add(
        lambda message: records.append(message.record),
        filter=sanitize_record,
        format="{message}",
    )
    yield records
    logger.remove(sink_id)
    clear_correlation_id()


def test_records_carry_request_correlation_id(captured: list[dict]) -> None:
    set_correlation_id("req-42")
    logger.info("inside request")
    clear_correlation_id()
    logger.info("outside request")

    assert [r["extra"]["correlation_id"] for r in captured] == ["req-42", "-"]


def test_sink_filter_redacts_before_emit(captured: list[dict]) -> None:
    logger.info("login attempt password=pw123")

    assert "pw123" not in captured[0]["message"]
