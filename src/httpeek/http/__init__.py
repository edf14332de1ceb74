"""
HTTP request and response handling.

Provides the pieces of the request pipeline:
- URL and key=value argument parsing
- Request dispatch over httpx
- Response rendering with JSON pretty-printing

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from httpeek.http.client import (
    Command,
    GetCommand,
    PostCommand,
    build_client,
    build_json_body,
    dispatch,
)
from httpeek.http.parsing import (
    KvPair,
    ValidatedUrl,
    parse_kv_pair,
    validate_url,
)
from httpeek.http.render import (
    MimeType,
    parse_mime,
    render,
)

__all__ = [
    "Command",
    "GetCommand",
    "PostCommand",
    "build_client",
    "build_json_body",
    "dispatch",
    "KvPair",
    "ValidatedUrl",
    "parse_kv_pair",
    "validate_url",
    "MimeType",
    "parse_mime",
    "render",
]
