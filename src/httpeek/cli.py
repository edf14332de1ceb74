"""
httpeek command-line entry point.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click

from httpeek import __version__
from httpeek.config import DEFAULT_TIMEOUT, HttpeekConfig, set_config
from httpeek.http.cli import get_cmd, post_cmd
from httpeek.logging_config import configure_logging


@click.group()
@click.version_option(__version__, prog_name="httpeek")
@click.option("-t", "--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True,
              help="Request timeout in seconds (0 disables it)")
@click.option("-L", "--follow/--no-follow", default=False, help="Follow redirects")
@click.option("-k", "--insecure", is_flag=True, help="Disable SSL verification")
@click.option("--debug", is_flag=True, help="Log request details to stderr")
def main(timeout: float, follow: bool, insecure: bool, debug: bool):
    """Send a GET or POST request and print the response.

    POST bodies are given as key=value pairs and sent as a JSON object.
    """
    configure_logging(debug=debug)
    set_config(HttpeekConfig.from_options(
        timeout=timeout,
        follow_redirects=follow,
        insecure=insecure,
        debug=debug,
    ))


main.add_command(get_cmd)
main.add_command(post_cmd)


if __name__ == "__main__":
    main()
