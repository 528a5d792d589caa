#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
"""Module containing the SpamExperts auto-login provider."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final, Self
from urllib.parse import quote, urlencode

from httpx import AsyncClient, HTTPError, Timeout

from ..exceptions import OperationFailed
from ._auth_ticket import AuthTicketResponseHandler, Ticket

if TYPE_CHECKING:
    from types import TracebackType

    from ._configuration import SpamExpertsConfiguration

AUTH_TICKET_PATH: Final = "/api/authticket/create/username/{username}/"

logger = getLogger(__name__)


@dataclass
class LoginResult:
    url: str
    username: str
    ticket: Ticket


class SpamExpertsProvider:
    def __init__(self: Self, configuration: SpamExpertsConfiguration, client: AsyncClient | None = None) -> None:
        """Initialize a new instance of the SpamExpertsProvider class."""
        self.configuration = configuration

        self._owns_client = client is None
        self._client = client if client is not None else AsyncClient(
            base_url=configuration.base_url,
            auth=(configuration.username, configuration.password),
            timeout=Timeout(configuration.timeout),
            verify=configuration.verify,
        )

    async def __aenter__(self: Self) -> Self:
        return self

    async def __aexit__(
        self: Self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self: Self) -> None:
        """Close the underlying HTTP client, if it was created by this provider."""
        if self._owns_client:
            await self._client.aclose()

    async def get_ticket(self: Self, username: str) -> Ticket:
        """
        Request a new auth ticket for the given SpamExperts user.

        :param username: The domain or user name to log in as.
        :return: The auth ticket.
        :raises OperationFailed: If the request fails or no valid ticket is returned.
        """
        path = AUTH_TICKET_PATH.format(username=quote(username, safe=""))

        try:
            response = await self._client.get(path)
        except HTTPError as e:
            msg = f"Failed to request auth ticket from SpamExperts: {e}"
            raise OperationFailed(msg, debug={"username": username, "error": repr(e)}) from e

        logger.debug(f"{response.http_version} {response.status_code} {response.reason_phrase}")

        return AuthTicketResponseHandler(response).get_ticket()

    def build_login_url(self: Self, ticket: Ticket) -> str:
        return f"{self.configuration.base_url}/?{urlencode({'authticket': ticket})}"

    async def login(self: Self, username: str) -> LoginResult:
        """Obtain an auth ticket and build an auto-login URL for the control panel."""
        ticket = await self.get_ticket(username)
        logger.info(f"Obtained SpamExperts auth ticket for {username}")

        return LoginResult(url=self.build_login_url(ticket), username=username, ticket=ticket)
