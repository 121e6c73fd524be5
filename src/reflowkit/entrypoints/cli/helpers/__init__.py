"""CLI helpers for reflowkit.

Parsing of logger-level options and stderr message emitters with emoji→ASCII
fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["error", "parse_log_level", "warn"]
