# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction scope shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from forum.shared.logging import logger


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """Yield a session inside one transaction.

    The transaction commits when the block exits normally and rolls back when
    it raises; the session is closed either way.
    """
    with factory() as session:
        try:
            with session.begin():
                yield session
        except Exception as exc:
            logger.debug(f"uow: rolled back after {type(exc).__name__}")
            raise


__all__ = ["unit_of_work_scope"]
