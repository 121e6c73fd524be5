"""Text helpers that sit around the reflow engine.

Predicates for quick checks, slicing and parsing helpers, and identifier case
converters. Everything here is a pure function of its arguments.
"""

from .casing import TextTransform, to_camel_case, to_dash_case, to_snake_case
from .predicates import is_blank, is_empty, is_not_blank, null_if_blank
from .strings import join_natural, truncate

__all__ = [
    "TextTransform",
    "is_blank",
    "is_empty",
    "is_not_blank",
    "join_natural",
    "null_if_blank",
    "to_camel_case",
    "to_dash_case",
    "to_snake_case",
    "truncate",
]
