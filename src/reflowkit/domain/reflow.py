"""Greedy single-pass text reflow.

The engine walks the input once, left to right, measuring one segment at a
time. A segment runs from the cursor up to and including the next breaking
character. Segments are appended while the running line count stays below the
width; on overflow a ``breaker`` is emitted and, depending on the
:class:`~reflowkit.domain.value_objects.WrapMethod`, the segment is either
moved to the next line or split mid-word with a ``hard_breaker``.

The cursor is an immutable :class:`~reflowkit.domain.value_objects.CursorState`
so the loop can be driven (and tested) one step at a time via :func:`advance`.

Examples:
    ```py
    >>> wrap("The quick brown fox", 10, breaker="|")
    'The |quick |brown fox'
    >>> wrap("Supercalifragilisticexpialidocious", 10, breaker="|", hard_breaker="-")
    'Supercali-|fragilist-|icexpiali-|docious'
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from reflowkit.domain.value_objects import (
    BREAKING_CHARS,
    DEFAULT_BREAKER,
    CursorState,
    WrapConfig,
    WrapMethod,
)

logger = logging.getLogger(__name__)


def find_next_break(text: str, start: int, breaking_chars: frozenset[str]) -> int | None:
    """Return the index of the first breaking character at or after ``start``.

    Args:
        text: The input text.
        start: Index to start scanning from.
        breaking_chars: Characters that count as breaks.

    Returns:
        The index, or None when no breaking character remains.
    """
    for index in range(start, len(text)):
        if text[index] in breaking_chars:
            return index
    return None


def advance(
    text: str, state: CursorState, config: WrapConfig
) -> tuple[CursorState, str]:
    """Run one iteration of the reflow loop.

    Args:
        text: The input text.
        state: Cursor position before the step.
        config: Wrap settings.

    Returns:
        The cursor after the step and the chunk of output it produced
        (possibly empty). A finished state is returned unchanged with "".
    """
    if state.done:
        return state, ""

    width = config.max_line_width
    position = state.string_position

    next_break = find_next_break(text, position, config.breaking_chars)
    if next_break is None:
        if len(text) - position <= width:
            return CursorState(len(text), state.line_position, done=True), text[position:]
        # no break left in an over-long tail: force one at the line edge
        next_break = position + width

    word_size = next_break - position + 1
    line_position = state.line_position + word_size

    if line_position < width:
        return (
            CursorState(position + word_size, line_position),
            text[position : position + word_size],
        )

    prior = line_position - word_size
    chunk = ""
    if config.method is WrapMethod.HARD_BREAK_ALWAYS or word_size > width:
        segment_size = width - prior - len(config.hard_breaker)
        if segment_size > 0:
            chunk = text[position : position + segment_size] + config.hard_breaker
            position += segment_size
        elif prior == 0:
            logger.debug(
                "Hard breaker %r does not fit in width %d; dropping it",
                config.hard_breaker,
                width,
            )
            taken = min(word_size, width)
            chunk = text[position : position + taken]
            position += taken
    elif prior == 0:
        # segment fills an empty line exactly
        chunk = text[position : position + word_size]
        position += word_size

    return CursorState(position, 0), chunk + config.breaker


def iter_wrap(text: str, config: WrapConfig) -> Iterator[str]:
    """Yield the output of :func:`wrap_with` chunk by chunk."""
    if len(text) <= config.max_line_width:
        yield text
        return

    state = CursorState()
    while not state.done:
        state, chunk = advance(text, state, config)
        if chunk:
            yield chunk


def wrap_with(text: str, config: WrapConfig) -> str:
    """Wrap ``text`` using a prepared :class:`WrapConfig`."""
    if len(text) <= config.max_line_width:
        return text
    return "".join(iter_wrap(text, config))


def wrap(  # pylint: disable=too-many-arguments
    text: str,
    max_line_width: int,
    method: WrapMethod = WrapMethod.HARD_BREAK_WHEN_NECESSARY,
    breaker: str = DEFAULT_BREAKER,
    hard_breaker: str = "",
    *,
    breaking_chars: frozenset[str] = BREAKING_CHARS,
) -> str:
    """Wrap ``text`` so that lines break before reaching ``max_line_width``.

    Lines end at spaces, hyphens, CR or LF. A token that cannot fit on any line
    is split mid-word and marked with ``hard_breaker``. Breaking characters
    are kept in the output; nothing is trimmed.

    Args:
        text: The text to wrap.
        max_line_width: Target line width; must be positive.
        method: Policy for tokens that overflow the current line.
        breaker: Text inserted at each line boundary.
        hard_breaker: Text inserted where a token is split mid-word.
        breaking_chars: Characters at which a line may end.

    Returns:
        The wrapped text, or ``text`` itself when it already fits.

    Raises:
        InvalidConfigurationError: If ``max_line_width`` is not positive.
    """
    config = WrapConfig(
        max_line_width=max_line_width,
        method=method,
        breaker=breaker,
        hard_breaker=hard_breaker,
        breaking_chars=breaking_chars,
    )
    return wrap_with(text, config)
