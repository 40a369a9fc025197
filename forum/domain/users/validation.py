# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Registration field rules.

Every rule works on characters, not bytes; all accepted characters are ASCII
so the two coincide.
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidEmailError, InvalidPasswordError, InvalidUsernameError

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 19
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 20

# Inclusive codepoint ranges.
PRINTABLE_ASCII = (32, 126)
VISIBLE_ASCII = (33, 126)


def _within(value: str, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return all(low <= ord(char) <= high for char in value)


def validate_email_address(email: str) -> None:
    if not email or not _within(email, VISIBLE_ASCII):
        raise InvalidEmailError()
    try:
        # Syntax only: no DNS, dotless hosts allowed. Reserved names such as
        # localhost, .local and .test are still refused by email-validator.
        validate_email(email, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError as exc:
        raise InvalidEmailError() from exc


def validate_username(username: str) -> None:
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise InvalidUsernameError()
    if not _within(username, PRINTABLE_ASCII):
        raise InvalidUsernameError()


def validate_password(password: str) -> None:
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise InvalidPasswordError()
    if not _within(password, VISIBLE_ASCII):
        raise InvalidPasswordError()


def validate_registration(username: str, email: str, password: str) -> None:
    validate_email_address(email)
    validate_username(username)
    validate_password(password)


__all__ = [
    "validate_email_address",
    "validate_password",
    "validate_registration",
    "validate_username",
]
