"""
Exceptions raised by httpeek.

Every error propagates to the command surface, which reports it and
exits non-zero. Nothing is retried or recovered locally.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class HttpeekError(Exception):
    """Base exception for httpeek errors."""
    pass


class ParseError(HttpeekError):
    """A command-line argument could not be parsed."""
    pass


class MalformedPairError(ParseError):
    """A body argument has no '=' separator."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Failed to parse {token!r}: expected key=value")


class InvalidUrlError(ParseError):
    """A URL argument is not a valid absolute URL."""

    def __init__(self, token: str, reason: str | None = None):
        self.token = token
        self.reason = reason
        message = f"Invalid URL {token!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RequestError(HttpeekError):
    """The request could not be completed."""
    pass


class TransportError(RequestError):
    """DNS, connect, TLS, timeout or I/O failure from the HTTP transport."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Request to {url} failed: {detail}")


class RenderError(HttpeekError):
    """The response could not be rendered."""
    pass


class InvalidContentTypeError(RenderError):
    """The Content-Type header is not a parseable MIME type."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid Content-Type header: {value!r}")


class MalformedJsonBodyError(RenderError):
    """A body declared as JSON is not valid JSON."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Response body is not valid JSON: {cause}")
