#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
from ..exceptions import OperationFailed


class ResponseMissingAuthTicket(OperationFailed):
    """Exception raised when a valid auth ticket cannot be obtained from a SpamExperts response."""
