"""
httpeek - a small HTTP client for the terminal

Sends a single GET or POST request and prints the response status line,
headers and body, pretty-printing JSON bodies.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.0.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
