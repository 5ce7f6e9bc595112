"""Unified exception hierarchy for SessionFly.

All library exceptions inherit from SessionFlyException, enabling unified
error handling across modules.

Categories:
- InvalidConfigurationException: Wiring and configuration mistakes, raised eagerly
- SessionNotStartedException: Engine used outside its start/finish span
- SessionFinishedException: A second finish() on the same request
- SessionPayloadException: Stored payloads that cannot be decoded or decrypted
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class SessionFlyException(Exception):
    """Base exception for all SessionFly errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_CONFIG").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class InvalidConfigurationException(SessionFlyException):
    """A component was wired or configured with unusable values."""

    def __init__(
        self,
        message: str,
        code: str | None = "SESSION_CONFIG",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


# =============================================================================
# Lifecycle Exceptions
# =============================================================================


class SessionNotStartedException(SessionFlyException):
    """A session operation was attempted before ``start()`` loaded a record."""

    def __init__(
        self,
        message: str = "Session has not been started",
        code: str | None = "SESSION_NOT_STARTED",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


class SessionFinishedException(SessionFlyException):
    """``finish()`` was called again without a ``reset()`` in between."""

    def __init__(
        self,
        message: str = "Session has already been finished",
        code: str | None = "SESSION_FINISHED",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


# =============================================================================
# Payload Exceptions
# =============================================================================


class SessionPayloadException(SessionFlyException):
    """A stored session payload could not be decoded."""


class DecryptionException(SessionPayloadException):
    """An encrypted payload was tampered with or encrypted under another key."""
