"""Identifier case conversion.

Uses the third-party ``regex`` module for the Unicode letter classes
(``\\p{Lu}``, ``\\p{Ll}``) and the variable-width look-behind the snake case
rules need; the standard ``re`` module supports neither.
"""

from enum import Enum

import regex

# two+ capitals or a non-capital, then a non-lowercase char followed by a non-capital
# HSBCBank => HSBC_Bank, iPhone => i_Phone, 24HourATM => 24_HourATM, Use24Hour => Use_24_Hour
SNAKE_BOUNDARY = regex.compile(r"(?<=\p{Lu}{2,}|\P{Lu})(\P{Ll})(?=\P{Lu})")
# capital runs after a lowercase letter: mDNSResponder => m_DNS_Responder
SNAKE_CAPITAL_RUN = regex.compile(r"(?<=\p{Ll})(\p{Lu}{2,})")
REPEATED_UNDERSCORES = regex.compile(r"_{2,}")

CAMEL_CAPITAL_RUN = regex.compile(r"(?<=\p{Lu})(\p{Lu}+)")
CAMEL_SEPARATOR = regex.compile(r"[\s\-_]+(\w)(\p{Lu}+)?")
CAMEL_AFTER_COLON = regex.compile(r"(?<=[:])(\p{Ll})?")


class TextTransform(Enum):
    """Transform applied to the first character of a camel-cased result."""

    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake case, keeping capital runs together.

    Examples:
        ```py
        >>> to_snake_case("TransactionID")
        'Transaction_ID'
        >>> to_snake_case("ReferenceIDNumber")
        'Reference_ID_Number'
        ```
    """
    text = text.replace(" ", "_")
    text = SNAKE_BOUNDARY.sub(r"_\1", text)
    text = SNAKE_CAPITAL_RUN.sub(r"_\1", text)
    return REPEATED_UNDERSCORES.sub("_", text)


def to_dash_case(text: str) -> str:
    """Same as :func:`to_snake_case` with dashes instead of underscores."""
    return to_snake_case(text).replace("_", "-")


def to_camel_case(text: str, first_char: TextTransform = TextTransform.LOWER) -> str:
    """Convert ``text`` to camel case.

    Whitespace, dashes and underscores start a new capital; capital runs are
    title-cased; a lowercase letter after a colon is capitalised (handy for
    namespaced names).

    Examples:
        ```py
        >>> to_camel_case("first_name")
        'firstName'
        >>> to_camel_case("XML-http request", TextTransform.UPPER)
        'XmlHttpRequest'
        ```
    """
    if not text:
        return text

    text = CAMEL_CAPITAL_RUN.sub(lambda m: m.group(1).lower(), text)
    text = CAMEL_SEPARATOR.sub(lambda m: m.group(1).upper(), text)
    text = CAMEL_AFTER_COLON.sub(lambda m: (m.group(1) or "").upper(), text)

    if first_char is TextTransform.UPPER:
        return text[0].upper() + text[1:]
    if first_char is TextTransform.LOWER:
        return text[0].lower() + text[1:]
    return text
