#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
"""Base handler for interpreting SpamExperts API responses."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self

from ..exceptions import CannotParseResponse, DebugData

if TYPE_CHECKING:
    from httpx import Response

logger = getLogger(__name__)


class ResponseHandler:
    def __init__(self: Self, response: Response) -> None:
        """Wrap a completed HTTP response."""
        self.response = response

    def assert_success(self: Self) -> None:
        """
        Assert the response has a successful (2xx) status code.

        :raises CannotParseResponse: If the service responded with an error status.
        """
        if not self.response.is_success:
            msg = f"Service responded with HTTP {self.response.status_code} {self.response.reason_phrase}".rstrip()
            raise CannotParseResponse(msg)

    def get_body(self: Self) -> str:
        """
        Return the response body decoded as text.

        Unlike `Response.text`, undecodable bytes are not replaced.

        :raises CannotParseResponse: If the body is empty or cannot be decoded.
        """
        encoding = self.response.charset_encoding or "utf-8"

        try:
            body = self.response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            msg = f"Unable to decode service response body as {encoding}"
            raise CannotParseResponse(msg) from e

        if not body:
            msg = "Empty service response body"
            raise CannotParseResponse(msg)

        return body

    def debug_data(self: Self, ticket: object | None = None) -> DebugData:
        return {
            "http_code": self.response.status_code,
            "content_type": self.response.headers.get("Content-Type", ""),
            "body": self.response.text,
            "ticket": ticket,
        }
