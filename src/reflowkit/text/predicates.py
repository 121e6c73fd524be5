"""String predicates.

Small yes/no checks on strings. The email, URL and MIME type checks are
pattern-based sanity checks, not full validators.
"""

import re

EMAIL_ADDRESS_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+\-']+@(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)
URL_PATTERN = re.compile(
    r"^(?:https?|ftp)://"  # scheme
    r"(?:[^\s:@/]+(?::[^\s@/]*)?@)?"  # user info
    r"(?:localhost|[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)*)"
    r"(?::\d{1,5})?"  # port
    r"(?:[/?#]\S*)?$",
    re.IGNORECASE,
)
MIME_TYPE_PATTERN = re.compile(
    r"^(?:application|audio|font|example|image|message|model|multipart|text|video|x-[\w.+\-]+)"
    r"/[\w.+\-]+(?:\s*;\s*[\w.+\-]+=(?:\"[^\"]*\"|[\w.+\-]+))*$",
    re.IGNORECASE,
)


def is_empty(text: str | None) -> bool:
    """Return True for None or the empty string."""
    return not text


def is_not_empty(text: str | None) -> bool:
    """Inverse of :func:`is_empty`."""
    return not is_empty(text)


def is_blank(text: str | None) -> bool:
    """Return True for None, the empty string, or whitespace only."""
    return text is None or text.strip() == ""


def is_not_blank(text: str | None) -> bool:
    """Inverse of :func:`is_blank`."""
    return not is_blank(text)


def null_if_blank(text: str | None) -> str | None:
    """Return None when ``text`` is blank, otherwise ``text`` unchanged."""
    return None if is_blank(text) else text


def is_digits(text: str) -> bool:
    """Return True if every character is a digit (vacuously True for "")."""
    return all(char.isdigit() for char in text)


def is_letters(text: str) -> bool:
    """Return True if every character is a letter (vacuously True for "")."""
    return all(char.isalpha() for char in text)


def is_letters_or_digits(text: str) -> bool:
    """Return True if every character is a letter or a digit."""
    return all(char.isalnum() for char in text)


def contains_only(text: str, *chars: str) -> bool:
    """Return True if ``text`` is made only of the given characters.

    Example:
        ```py
        >>> contains_only("0110", "0", "1")
        True
        ```
    """
    allowed = set(chars)
    return all(char in allowed for char in text)


def is_match(text: str, pattern: str | re.Pattern[str]) -> bool:
    """Return True if ``pattern`` matches anywhere in ``text``."""
    return re.search(pattern, text) is not None


def is_email_address(text: str) -> bool:
    """Return True if ``text`` looks like a single email address."""
    return EMAIL_ADDRESS_PATTERN.match(text) is not None


def is_url(text: str) -> bool:
    """Return True if ``text`` looks like an absolute http(s)/ftp URL."""
    return URL_PATTERN.match(text) is not None


def is_mime_type(text: str) -> bool:
    """Return True if ``text`` looks like a MIME type such as ``text/plain``."""
    return MIME_TYPE_PATTERN.match(text) is not None
