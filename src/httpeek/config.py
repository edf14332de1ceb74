"""
Configuration management for httpeek.

Settings come from command-line options only; there is no config file
and no environment lookup.
"""

from dataclasses import dataclass

from httpeek import __version__


DEFAULT_TIMEOUT = 30.0


@dataclass
class HttpeekConfig:
    """Transport and output settings for a single invocation."""

    # Seconds; None leaves the request without a timeout
    timeout: float | None = DEFAULT_TIMEOUT
    follow_redirects: bool = False
    verify_ssl: bool = True
    user_agent: str = f"httpeek/{__version__}"

    debug: bool = False

    @classmethod
    def from_options(
        cls,
        timeout: float | None = DEFAULT_TIMEOUT,
        follow_redirects: bool = False,
        insecure: bool = False,
        debug: bool = False,
    ) -> "HttpeekConfig":
        """Build configuration from CLI option values."""
        if timeout is not None and timeout <= 0:
            timeout = None
        return cls(
            timeout=timeout,
            follow_redirects=follow_redirects,
            verify_ssl=not insecure,
            debug=debug,
        )


# Global config instance
_config: HttpeekConfig | None = None


def get_config() -> HttpeekConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = HttpeekConfig()
    return _config


def set_config(config: HttpeekConfig | None) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
