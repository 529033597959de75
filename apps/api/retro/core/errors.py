"""
Lifecycle errors raised by the service layer.

The app registers one handler that renders ``status_code`` and ``message`` as the response.
"""

from __future__ import annotations


class RetroError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(RetroError):
    """A referenced record does not exist."""

    status_code = 404


class InvalidStateError(RetroError):
    """The operation is not allowed in the entity's current lifecycle state."""

    status_code = 400

    def __init__(self, message: str, reasons: list[str] | None = None) -> None:
        self.reasons = list(reasons or [])
        super().__init__(message)


class ForbiddenError(RetroError):
    """Blocked by a lock or by the reveal gate."""

    status_code = 403
