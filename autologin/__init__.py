#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
"""AutoLogin - Python library for generating auto-login URLs for third-party control panels."""

from .exceptions import AutoLoginError, CannotParseResponse, DebugData, OperationFailed

__all__ = [
    "AutoLoginError",
    "CannotParseResponse",
    "DebugData",
    "OperationFailed",
]
