#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
"""Exceptions shared by all AutoLogin providers."""

from __future__ import annotations

from typing import Any, Self, TypedDict


class DebugData(TypedDict):
    """Diagnostic context describing the HTTP response an operation failed on."""

    http_code: int
    content_type: str
    body: str
    ticket: Any | None


class AutoLoginError(Exception):
    """Base exception for AutoLogin errors."""


class OperationFailed(AutoLoginError):
    def __init__(self: Self, message: str, debug: DebugData | dict[str, Any] | None = None) -> None:
        """Exception raised when a provider operation fails, with optional debug context for logging."""
        self.message = message
        self.debug = debug if debug is not None else {}

        super().__init__(message)


class CannotParseResponse(OperationFailed):
    """Exception raised when a service response cannot be interpreted."""
