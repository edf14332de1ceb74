"""
GET and POST CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging

import click
import httpx
from rich.console import Console

from httpeek.errors import HttpeekError
from httpeek.http.client import Command, GetCommand, PostCommand, build_client, dispatch
from httpeek.http.parsing import KV_PAIR, URL, KvPair, ValidatedUrl
from httpeek.http.render import render

logger = logging.getLogger(__name__)


async def run_command(
    command: Command,
    console: Console | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Send one request and render its response."""
    async with build_client(transport=transport) as client:
        response = await dispatch(client, command)
    render(response, console)


def execute(command: Command) -> None:
    """Run a command to completion, turning failures into a CLI error."""
    try:
        asyncio.run(run_command(command))
    except HttpeekError as e:
        logger.debug("Command failed", exc_info=e)
        raise click.ClickException(str(e)) from e


@click.command("get")
@click.argument("url", type=URL)
def get_cmd(url: ValidatedUrl):
    """Retrieve a URL and print the response.

    Examples:
        httpeek get https://httpbin.org/get
    """
    execute(GetCommand(url=url))


@click.command("post")
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KV_PAIR)
def post_cmd(url: ValidatedUrl, body: tuple[KvPair, ...]):
    """Post key=value pairs to a URL as a JSON object and print the response.

    Examples:
        httpeek post https://httpbin.org/post a=1 b=2
    """
    execute(PostCommand(url=url, body=body))
