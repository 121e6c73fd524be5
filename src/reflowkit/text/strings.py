"""Slicing, searching and parsing helpers for strings."""

from __future__ import annotations

import gzip
import re
from collections.abc import Callable, Sequence
from typing import TypeVar
from urllib.parse import quote_plus

from reflowkit.domain.errors import NotADigitError, PairParseError

from .predicates import is_blank

T = TypeVar("T")


def left(text: str, length: int) -> str:
    """Return the first ``length`` characters of ``text``."""
    return text if len(text) <= length else text[:length]


def right(text: str, length: int) -> str:
    """Return the last ``length`` characters of ``text``."""
    return text if len(text) <= length else text[len(text) - length :]


def truncate(text: str, length_limit: int, trailing: str = "...") -> str:
    """Shorten ``text`` to ``length_limit`` characters, ending with ``trailing``.

    With 20 characters in, a limit of 10 and ``"..."`` as trailing, the result
    is the first 7 characters followed by ``"..."``. Text that already fits is
    returned unchanged.
    """
    if len(text) <= length_limit:
        return text
    return left(text, max(length_limit - len(trailing), 0)) + trailing


def digit_at(text: str, index: int) -> int:
    """Return the digit found at ``index``.

    Example:
        ```py
        >>> digit_at("122240861", 6)
        8
        ```

    Raises:
        ValueError: If ``text`` is blank.
        NotADigitError: If the character is not in ``0-9``.
        IndexError: If ``index`` is out of range.
    """
    if is_blank(text):
        raise ValueError("text must not be blank")
    character = text[index]
    if not "0" <= character <= "9":
        raise NotADigitError(index, character)
    return ord(character) - ord("0")


def from_index_of(text: str, pattern: str, include_match: bool = False) -> str:
    """Return the part of ``text`` after the first match of ``pattern``.

    ``text`` is returned unchanged when there is no match.

    Example:
        ```py
        >>> from_index_of("Boston, MA", ", ")
        'MA'
        ```
    """
    if (match := re.search(pattern, text)) is None:
        return text
    offset = match.start() if include_match else match.end()
    return text[offset:]


def until_index_of(text: str, pattern: str, include_match: bool = False) -> str:
    """Return the part of ``text`` before the first match of ``pattern``.

    ``text`` is returned unchanged when there is no match.

    Example:
        ```py
        >>> until_index_of("Boston, MA", ",")
        'Boston'
        ```
    """
    if (match := re.search(pattern, text)) is None:
        return text
    offset = match.end() if include_match else match.start()
    return text[:offset]


def indexes_of(text: str, search: str) -> list[int]:
    """Return the start index of every occurrence of ``search``, overlaps included."""
    result: list[int] = []
    index = 0
    while index < len(text):
        index = text.find(search, index)
        if index == -1:
            break
        result.append(index)
        index += 1
    return result


def indent(text: str, count: int, indent_str: str = " ") -> str:
    """Prefix every line of ``text`` with ``indent_str`` repeated ``count`` times."""
    return re.sub(r"(?m)^", lambda _: indent_str * count, text)


def join_natural(items: Sequence[str], delimiter: str, last_delimiter: str) -> str:
    """Join ``items`` using a different delimiter before the last one.

    Example:
        ```py
        >>> join_natural(["Apples", "Eggs", "Milk"], ", ", " and ")
        'Apples, Eggs and Milk'
        ```
    """
    items = list(items)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return delimiter.join(items[:-1]) + last_delimiter + items[-1]


def parse_dictionary(
    text: str, pair_separator: str, key_value_separator: str
) -> dict[str, str]:
    """Parse delimited key/value pairs into a dict.

    Both separators are regular expressions. Blank fragments are skipped;
    later keys win.

    Example:
        ```py
        >>> parse_dictionary("a=1; b = 2", ";", "=")
        {'a': '1', 'b': '2'}
        ```

    Raises:
        PairParseError: If a fragment does not contain the key/value separator.
    """
    pattern = rf"^([^{key_value_separator}]+)\s*{key_value_separator}\s*(.*?)$"
    result: dict[str, str] = {}
    for fragment in re.split(pair_separator, text):
        if not fragment.strip():
            continue
        if (match := re.match(pattern, fragment.strip())) is None:
            raise PairParseError(fragment, pattern)
        result[match.group(1).strip()] = match.group(2)
    return result


def regex_group_value(text: str, pattern: str, group: str | int) -> str | None:
    """Return the captured ``group`` of the first match, or None."""
    if (match := re.search(pattern, text)) is None:
        return None
    return match.group(group)


def words(text: str) -> list[str]:
    """Split ``text`` on runs of non-word characters, dropping blanks."""
    return [word for word in re.split(r"\W+", text) if word.strip()]


def split_whitespace(text: str) -> list[str]:
    """Split ``text`` on runs of whitespace (like Perl's ``qw``)."""
    return re.split(r"\s+", text)


def split_as(
    text: str, converter: Callable[[str], T], separators: str = ","
) -> list[T]:
    """Split ``text`` on any of ``separators`` and convert every item.

    Example:
        ```py
        >>> split_as("1,2,3", int)
        [1, 2, 3]
        ```
    """
    if is_blank(text):
        return []
    return [converter(item) for item in re.split(f"[{re.escape(separators)}]", text)]


def gzip_compress(text: str, encoding: str = "utf-8") -> bytes:
    """Return ``text`` encoded with ``encoding`` and gzip-compressed."""
    return gzip.compress(text.encode(encoding))


def to_hex(text: str, encoding: str = "utf-16-le") -> str:
    """Return the hex form of ``text`` encoded with ``encoding``."""
    return text.encode(encoding).hex()


def url_encode(text: str, encoding: str = "utf-8") -> str:
    """Form-encode ``text`` (spaces become ``+``)."""
    return quote_plus(text, encoding=encoding)
