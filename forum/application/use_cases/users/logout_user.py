"""Use-case for revoking login sessions."""

from __future__ import annotations

from forum.domain.users.repositories import SessionRegistry


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionRegistry) -> None:
        self._sessions = sessions

    def execute(self, token: str) -> None:
        if token:
            self._sessions.delete(token)
