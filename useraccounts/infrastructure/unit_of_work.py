# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction scope shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from useraccounts.shared.logging import logger


class TransactionScope:
    """One session per repository call.

    The session commits when the block exits cleanly and rolls back when it
    raises. It is closed either way, so rows handed back to callers must
    already be mapped to domain objects.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("transaction scope used outside of a with block")
        return self._session

    def __enter__(self) -> TransactionScope:
        self._session = self._session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        self._session = None
        try:
            if exc_type is None:
                session.commit()
            else:
                logger.debug(f"db: rolling back after {exc_type.__name__}")
                session.rollback()
        except Exception:
            logger.exception("db: commit failed, rolling back")
            session.rollback()
            raise
        finally:
            session.close()


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    with TransactionScope(factory) as scope:
        yield scope.session
