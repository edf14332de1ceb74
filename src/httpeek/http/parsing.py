"""
Argument parsing for request URLs and key=value body pairs.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass

import click
import httpx

from httpeek.errors import InvalidUrlError, MalformedPairError, ParseError


# Schemes whose URLs must name a host
HOST_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class KvPair:
    """A key=value argument destined for a JSON request body."""
    key: str
    value: str


class ValidatedUrl(str):
    """A URL string that passed syntactic validation, kept verbatim."""
    __slots__ = ()


def parse_kv_pair(token: str) -> KvPair:
    """Split a token on its first '='.

    The value may be empty or contain further '=' characters.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedPairError(token)
    return KvPair(key=key, value=value)


def validate_url(token: str) -> ValidatedUrl:
    """Check that a token is an absolute URL and return it unchanged."""
    try:
        url = httpx.URL(token)
    except (httpx.InvalidURL, ValueError) as e:
        raise InvalidUrlError(token, str(e)) from e

    if not url.scheme:
        raise InvalidUrlError(token, "relative URL without a scheme")
    if url.scheme in HOST_SCHEMES and not url.host:
        raise InvalidUrlError(token, "missing host")

    return ValidatedUrl(token)


class KvPairType(click.ParamType):
    """Click parameter type for key=value body arguments."""

    name = "key=value"

    def convert(self, value, param, ctx):
        if isinstance(value, KvPair):
            return value
        try:
            return parse_kv_pair(value)
        except ParseError as e:
            self.fail(str(e), param, ctx)


class UrlType(click.ParamType):
    """Click parameter type for request URLs."""

    name = "url"

    def convert(self, value, param, ctx):
        if isinstance(value, ValidatedUrl):
            return value
        try:
            return validate_url(value)
        except ParseError as e:
            self.fail(str(e), param, ctx)


KV_PAIR = KvPairType()
URL = UrlType()
