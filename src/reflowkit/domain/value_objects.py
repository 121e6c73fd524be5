"""Value objects used by the reflow engine."""

from dataclasses import dataclass
from enum import Enum

from reflowkit.domain.errors import InvalidConfigurationError

BREAKING_CHARS: frozenset[str] = frozenset({" ", "-", "\r", "\n"})
DEFAULT_BREAKER = "\r\n"


class WrapMethod(Enum):
    """How an overflowing token is handled.

    - HARD_BREAK_ALWAYS: split the token at the line edge whenever the line
      overflows, even if the token would fit on a fresh line.
    - HARD_BREAK_WHEN_NECESSARY: move the token to the next line, splitting it
      only when it is wider than a whole line.
    """

    HARD_BREAK_ALWAYS = "hard-break-always"
    HARD_BREAK_WHEN_NECESSARY = "hard-break-when-necessary"


@dataclass(frozen=True)
class WrapConfig:
    """Settings for a single wrap run.

    Attributes:
        max_line_width: Target line width; must be positive.
        method: Policy for overflowing tokens.
        breaker: Text emitted at every line boundary.
        hard_breaker: Text emitted after a token is split mid-word.
        breaking_chars: Characters at which a line may end.

    Raises:
        InvalidConfigurationError: If the width is not positive or the
            breaking-character set is empty or holds multi-character strings.
    """

    max_line_width: int
    method: WrapMethod = WrapMethod.HARD_BREAK_WHEN_NECESSARY
    breaker: str = DEFAULT_BREAKER
    hard_breaker: str = ""
    breaking_chars: frozenset[str] = BREAKING_CHARS

    def __post_init__(self) -> None:
        if self.max_line_width <= 0:
            raise InvalidConfigurationError(
                "max_line_width", self.max_line_width, "must be greater than zero"
            )
        if not self.breaking_chars:
            raise InvalidConfigurationError(
                "breaking_chars", self.breaking_chars, "must not be empty"
            )
        if any(len(char) != 1 for char in self.breaking_chars):
            raise InvalidConfigurationError(
                "breaking_chars",
                self.breaking_chars,
                "every member must be a single character",
            )


@dataclass(frozen=True)
class CursorState:
    """Position of the engine between two steps.

    Attributes:
        string_position: Index of the next unconsumed input character.
        line_position: Characters counted on the current output line.
        done: True once the tail has been emitted.
    """

    string_position: int = 0
    line_position: int = 0
    done: bool = False
