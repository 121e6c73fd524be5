"""Configuration utilities for reflowkit.

This module centralizes the environment variables the CLI and library read,
and the helpers that validate them.
"""

import os

from reflowkit.domain.errors import InvalidConfigurationError, ReflowKitError

WIDTH_ENV_VAR = "REFLOWKIT_WIDTH"  # pragma: no mutate
SQL_URI_ENV_VAR = "REFLOWKIT_SQL_URI"  # pragma: no mutate
DEFAULT_WIDTH = 80


class SqlUriNotSetError(ReflowKitError):
    """Raised when the REFLOWKIT_SQL_URI environment variable is not set."""


def get_default_width() -> int:
    """Get the default wrap width from the environment.

    Returns:
        The value of `REFLOWKIT_WIDTH` as an int, or `DEFAULT_WIDTH` when unset.

    Raises:
        InvalidConfigurationError: If the value is not a positive integer.
    """
    if not (raw := os.environ.get(WIDTH_ENV_VAR, "").strip()):
        return DEFAULT_WIDTH
    try:
        width = int(raw)
    except ValueError as e:
        raise InvalidConfigurationError(WIDTH_ENV_VAR, raw, "must be an integer") from e
    if width <= 0:
        raise InvalidConfigurationError(WIDTH_ENV_VAR, width, "must be greater than zero")
    return width


def get_sql_uri() -> str:
    """Get the SQL Server connection URI from the environment.

    Returns:
        The value of the `REFLOWKIT_SQL_URI` environment variable.

    Raises:
        SqlUriNotSetError: If `REFLOWKIT_SQL_URI` is not set.
    """
    if not (uri := os.environ.get(SQL_URI_ENV_VAR)):
        raise SqlUriNotSetError
    return uri
