#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
"""Package containing the auto-login provider for the SpamExperts control panel."""

from ._auth_ticket import AuthTicketResponseHandler, Ticket, is_valid_ticket
from ._configuration import SpamExpertsConfiguration
from ._exceptions import ResponseMissingAuthTicket
from ._provider import LoginResult, SpamExpertsProvider
from ._response_handler import ResponseHandler

__all__ = [
    "AuthTicketResponseHandler",
    "LoginResult",
    "ResponseHandler",
    "ResponseMissingAuthTicket",
    "SpamExpertsConfiguration",
    "SpamExpertsProvider",
    "Ticket",
    "is_valid_ticket",
]
