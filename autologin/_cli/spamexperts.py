#  Copyright (C) 2024  Cypheriel
from __future__ import annotations

import asyncio
from logging import getLogger
from typing import Annotated

import typer

from ..exceptions import OperationFailed
from ..spamexperts import LoginResult, SpamExpertsConfiguration, SpamExpertsProvider
from .util.rich_console import console, err_console

__ALIAS__ = "se"

app = typer.Typer(name="spamexperts", help="SpamExperts control panel auto-login.")
logger = getLogger(__name__)

HostnameOption = Annotated[
    str,
    typer.Option("--hostname", envvar="SPAMEXPERTS_HOSTNAME", help="Hostname of the SpamExperts control panel."),
]
AdminUsernameOption = Annotated[
    str,
    typer.Option("--username", envvar="SPAMEXPERTS_USERNAME", help="API username."),
]
AdminPasswordOption = Annotated[
    str,
    typer.Option("--password", envvar="SPAMEXPERTS_PASSWORD", help="API password.", show_default=False),
]


async def _login(configuration: SpamExpertsConfiguration, username: str) -> LoginResult:
    async with SpamExpertsProvider(configuration) as provider:
        return await provider.login(username)


@app.command(help="Create an auto-login URL for a domain or user.")
def login(
    user: Annotated[str, typer.Argument(help="The domain or user to log in as.", show_default=False)],
    hostname: HostnameOption,
    username: AdminUsernameOption,
    password: AdminPasswordOption,
    timeout: Annotated[float, typer.Option(help="Request timeout in seconds.")] = 10.0,
) -> None:
    configuration = SpamExpertsConfiguration(
        hostname=hostname,
        username=username,
        password=password,
        timeout=timeout,
    )

    try:
        result = asyncio.run(_login(configuration, user))
    except OperationFailed as e:
        logger.debug(f"{e.debug = }")
        err_console.print(f"[red]{e.message}[/]")
        raise typer.Exit(1) from e

    console.print(result.url, soft_wrap=True)
