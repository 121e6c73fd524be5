"""Unit tests for reflowkit.text.predicates."""

import re

import pytest

from reflowkit.text import predicates as p

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("text", "empty", "blank"),
    [
        (None, True, True),
        ("", True, True),
        ("   \t\n", False, True),
        (" x ", False, False),
    ],
    ids=["none", "empty", "whitespace", "text"],
)
def test_empty_and_blank(text, empty, blank):
    """Empty means no characters; blank also covers whitespace."""
    assert p.is_empty(text) is empty
    assert p.is_not_empty(text) is not empty
    assert p.is_blank(text) is blank
    assert p.is_not_blank(text) is not blank


def test_null_if_blank():
    """Blank strings collapse to None; others pass through."""
    assert p.null_if_blank("  ") is None
    assert p.null_if_blank(None) is None
    assert p.null_if_blank(" a ") == " a "


@pytest.mark.parametrize(
    ("func", "good", "bad"),
    [
        (p.is_digits, "0123", "12a"),
        (p.is_letters, "abcÆ", "ab1"),
        (p.is_letters_or_digits, "ab12", "ab 12"),
    ],
    ids=["digits", "letters", "letters-or-digits"],
)
def test_character_class_checks(func, good, bad):
    """Every character must belong to the class; "" passes vacuously."""
    assert func(good)
    assert not func(bad)
    assert func("")


def test_contains_only():
    """Only the listed characters are allowed."""
    assert p.contains_only("0110", "0", "1")
    assert not p.contains_only("0120", "0", "1")


def test_is_match_accepts_string_or_compiled_pattern():
    """Patterns match anywhere in the text."""
    assert p.is_match("order 66", r"\d+")
    assert p.is_match("order 66", re.compile(r"der"))
    assert not p.is_match("order", r"\d")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("jane.doe@example.com", True),
        ("o'brien+tag@mail.example.co.uk", True),
        ("jane.doe@", False),
        ("jane doe@example.com", False),
        ("a@b@example.com", False),
    ],
)
def test_is_email_address(text, expected):
    """Email check accepts common shapes and rejects obvious junk."""
    assert p.is_email_address(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("https://example.com", True),
        ("http://user:pw@localhost:8080/path?q=1#frag", True),
        ("ftp://files.example.org/pub", True),
        ("mailto:jane@example.com", False),
        ("example.com", False),
        ("https://exa mple.com", False),
    ],
)
def test_is_url(text, expected):
    """Only absolute http(s)/ftp URLs pass."""
    assert p.is_url(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("text/plain", True),
        ("application/vnd.ms-excel", True),
        ('text/html; charset="utf-8"', True),
        ("x-custom/thing", True),
        ("plain", False),
        ("nonsense/type", False),
    ],
)
def test_is_mime_type(text, expected):
    """MIME types need a known top-level type and a subtype."""
    assert p.is_mime_type(text) is expected
