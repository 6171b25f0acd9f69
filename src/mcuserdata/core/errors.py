"""Typed failures raised by the lookup operations.

Every failure is terminal for the call that raised it: there are no retries
and no placeholder results.
"""

from __future__ import annotations


class MinecraftUserDataError(Exception):
    """Base class for every error raised by this library."""


class NotFoundError(MinecraftUserDataError):
    """The upstream lookup failed or the player is unknown."""

    def __init__(self, query: str, *, status_code: int | None = None, reason: str | None = None) -> None:
        self.query = query
        self.status_code = status_code
        self.reason = reason
        message = f"Player not found: {query!r}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ProfileNotFoundError(MinecraftUserDataError):
    """The player exists but the session profile has no texture properties."""

    def __init__(self, player_id: str) -> None:
        self.player_id = player_id
        super().__init__(f"Session profile {player_id!r} has no texture properties")


class MalformedPayloadError(MinecraftUserDataError):
    """The texture payload is present but cannot be decoded."""


class ProfileMismatchError(MinecraftUserDataError):
    """Two upstream records for the same player disagree on its id."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Profile id mismatch: expected {expected!r}, got {actual!r}")
