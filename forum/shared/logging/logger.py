# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup: one format, two sinks, request correlation ids."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _root_logger

from .sensitive_filter import sanitize_record

DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / "instance" / "forum.log"

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


def _attach_correlation_id(record: dict[str, Any]) -> None:
    record["extra"].setdefault("correlation_id", _correlation_id.get())


logger = _root_logger.patch(_attach_correlation_id)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("-")


class _InterceptHandler(logging.Handler):
    """Forward stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    debug_mode: bool = False,
    *,
    level: str | None = None,
    log_file: str | Path | None = None,
) -> None:
    level = (level or ("DEBUG" if debug_mode else "INFO")).upper()
    log_path = Path(log_file) if log_file else DEFAULT_LOG_FILE
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _root_logger.remove()
    _root_logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        filter=sanitize_record,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
    _root_logger.add(
        log_path,
        level=level,
        format=_FORMAT,
        filter=sanitize_record,
        rotation="10 MB",
        retention=5,
        backtrace=False,
        diagnose=False,
        enqueue=True,
        encoding="utf-8",
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
