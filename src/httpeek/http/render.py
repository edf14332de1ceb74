"""
Response renderer.

Prints the status line, headers and body of a response. JSON bodies are
re-indented; everything else is written as received.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
import re
from dataclasses import dataclass, field

import httpx
from rich.console import Console
from rich.text import Text

from httpeek.errors import InvalidContentTypeError, MalformedJsonBodyError

logger = logging.getLogger(__name__)

JSON_ESSENCE = "application/json"

STATUS_STYLE = "blue"
HEADER_NAME_STYLE = "green"
JSON_STYLE = "cyan"

# RFC 7230 token and quoted-string
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_QUOTED = r'"(?:[^"\\]|\\.)*"'

_ESSENCE_RE = re.compile(rf"\s*({_TOKEN})/({_TOKEN})\s*")
_PARAM_RE = re.compile(rf"\s*;\s*(?:({_TOKEN})=({_TOKEN}|{_QUOTED}))?\s*")


@dataclass(frozen=True)
class MimeType:
    """A parsed media type."""
    type: str
    subtype: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def is_json(self) -> bool:
        return self.essence == JSON_ESSENCE


def parse_mime(value: str) -> MimeType:
    """Parse a Content-Type value such as 'application/json; charset=utf-8'."""
    match = _ESSENCE_RE.match(value)
    if not match:
        raise InvalidContentTypeError(value)

    params: dict[str, str] = {}
    pos = match.end()
    while pos < len(value):
        param = _PARAM_RE.match(value, pos)
        if not param:
            raise InvalidContentTypeError(value)
        name, param_value = param.group(1), param.group(2)
        if name:
            if param_value.startswith('"'):
                param_value = re.sub(r"\\(.)", r"\1", param_value[1:-1])
            params[name.lower()] = param_value
        pos = param.end()

    return MimeType(
        type=match.group(1).lower(),
        subtype=match.group(2).lower(),
        params=params,
    )


def get_content_type(response: httpx.Response) -> MimeType | None:
    """Parse the response's Content-Type header, if it has one."""
    # A repeated header counts once; the first value is the declared type
    values = response.headers.get_list("content-type")
    if not values:
        return None
    return parse_mime(values[0])


def format_status_line(response: httpx.Response) -> str:
    """Protocol version, status code and reason phrase."""
    return f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()


def format_json(text: str, indent: int = 2) -> str:
    """Re-indent JSON text, keeping key order."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJsonBodyError(e) from e
    return json.dumps(data, indent=indent, ensure_ascii=False)


def format_body(mime: MimeType | None, text: str) -> str:
    """Pretty-print JSON bodies; return anything else unchanged."""
    if mime is not None and mime.is_json and text.strip():
        return format_json(text)
    return text


def render(response: httpx.Response, console: Console | None = None) -> None:
    """Write status line, headers and body of a fully read response."""
    console = console or Console(highlight=False)

    console.print(Text(format_status_line(response), style=STATUS_STYLE), soft_wrap=True)
    console.print()

    for name, value in response.headers.multi_items():
        console.print(
            Text.assemble((name, HEADER_NAME_STYLE), f": {value}"),
            soft_wrap=True,
        )
    console.print()

    mime = get_content_type(response)
    # Format the whole body before writing any of it
    body = format_body(mime, response.text)
    logger.debug("Rendering %d character body (content type %s)",
                 len(body), mime.essence if mime else "none")

    if mime is not None and mime.is_json:
        console.out(body, style=JSON_STYLE, highlight=False)
    else:
        # Written verbatim, outside rich text rendering
        console.file.write(body + "\n")
        console.file.flush()
