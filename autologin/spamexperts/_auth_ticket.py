#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
"""Module containing the handler that parses an auth ticket from a SpamExperts response body."""

from __future__ import annotations

from logging import getLogger
from string import hexdigits
from typing import Final, NewType, Self, TypeGuard

from ..exceptions import CannotParseResponse
from ._exceptions import ResponseMissingAuthTicket
from ._response_handler import ResponseHandler

Ticket = NewType("Ticket", str)

TICKET_LENGTH: Final = 40

logger = getLogger(__name__)


def is_valid_ticket(ticket: object) -> TypeGuard[Ticket]:
    """
    Determine whether the given value is a valid auth ticket.

    >>> is_valid_ticket("a1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6e7f8a9b0")
    True
    >>> is_valid_ticket("not-a-valid-ticket")
    False
    >>> is_valid_ticket(None)
    False
    """
    if not isinstance(ticket, str):
        return False

    return len(ticket) == TICKET_LENGTH and all(c in hexdigits for c in ticket)


class AuthTicketResponseHandler(ResponseHandler):
    def get_ticket(self: Self) -> Ticket:
        """
        Extract an auth ticket from the response.

        :return: The valid auth ticket.
        :raises ResponseMissingAuthTicket: If an auth ticket cannot be determined.
        """
        try:
            self.assert_success()

            ticket = self.get_body()
        except CannotParseResponse as e:
            logger.warning(f"Failed to obtain auth ticket: {e.message}")
            raise ResponseMissingAuthTicket(e.message, debug=self.debug_data(ticket=None)) from e

        if not is_valid_ticket(ticket):
            debug = self.debug_data(ticket=ticket)
            logger.warning("Service response did not contain a valid auth ticket.")
            logger.debug(f"{debug = }")

            msg = "Unable to parse valid auth ticket from service response"
            raise ResponseMissingAuthTicket(msg, debug=debug)

        return ticket

    def assert_success(self: Self) -> None:
        """
        Assert the auth ticket request was successful.

        :raises CannotParseResponse: If the status code or the body signals an error.
        """
        super().assert_success()

        body = self.get_body().lower()

        if not body.startswith("error:"):
            return

        logger.debug(f"Service returned an error: {body!r}")

        if "domain" in body and "not registered" in body:
            msg = "Domain name doesn't exist"
            raise CannotParseResponse(msg)

        if "no valid user" in body:
            msg = "Service account doesn't exist"
            raise CannotParseResponse(msg)

        msg = "Failed to get domain name auth ticket"
        raise CannotParseResponse(msg)
