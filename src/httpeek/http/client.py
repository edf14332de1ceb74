"""
Request dispatcher.

Builds exactly one HTTP request from a parsed command and sends it over
a shared httpx client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
from dataclasses import dataclass
from typing import Iterable, assert_never

import httpx

from httpeek.config import HttpeekConfig, get_config
from httpeek.errors import TransportError
from httpeek.http.parsing import KvPair, ValidatedUrl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetCommand:
    """GET a URL with no body."""
    url: ValidatedUrl


@dataclass(frozen=True)
class PostCommand:
    """POST key=value pairs to a URL as a JSON object."""
    url: ValidatedUrl
    body: tuple[KvPair, ...] = ()


Command = GetCommand | PostCommand


def build_client(
    config: HttpeekConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the HTTP client used for the request."""
    config = config or get_config()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout),
        verify=config.verify_ssl,
        follow_redirects=config.follow_redirects,
        headers={"User-Agent": config.user_agent},
        transport=transport,
    )


def build_json_body(pairs: Iterable[KvPair]) -> dict[str, str]:
    """Collect pairs into a JSON object; a repeated key keeps its last value."""
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


async def dispatch(client: httpx.AsyncClient, command: Command) -> httpx.Response:
    """Send the request described by command and read the full response."""
    try:
        match command:
            case GetCommand(url=url):
                logger.debug("GET %s", url)
                response = await client.get(url)
            case PostCommand(url=url, body=pairs):
                content = json.dumps(build_json_body(pairs))
                logger.debug("POST %s (%d bytes)", url, len(content))
                response = await client.post(
                    url,
                    content=content,
                    headers={"Content-Type": "application/json"},
                )
            case _:
                assert_never(command)
        await response.aread()
    except httpx.HTTPError as e:
        logger.debug("Transport failure for %s: %r", command.url, e)
        raise TransportError(command.url, e) from e

    logger.debug(
        "%s %s -> %d (%d bytes)",
        response.request.method, command.url, response.status_code, len(response.content),
    )
    return response
