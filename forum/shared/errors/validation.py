# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translate pydantic payload errors into the shared `ValidationError`."""

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    # Only locations and error types leave the process; pydantic messages echo input.
    errors = [{"field": _location(err["loc"]), "type": err["type"]} for err in exc.errors()]
    return {
        "fields": sorted({error["field"] for error in errors}),
        "errors": errors,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
