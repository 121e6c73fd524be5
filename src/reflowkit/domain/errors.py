"""Library error definitions."""

# ============================================================================
#                               Base error
# ============================================================================


class ReflowKitError(Exception):
    """Base class for all reflowkit errors."""


# ============================================================================
#                           Reflow related errors
# ============================================================================


class InvalidConfigurationError(ReflowKitError, ValueError):
    """Raised when a wrap configuration value is out of range."""

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {setting} ({value!r}): {reason}")
        self.setting = setting
        self.value = value
        self.reason = reason


# ============================================================================
#                           Text helper errors
# ============================================================================


class NotADigitError(ReflowKitError, ValueError):
    """Raised when the character at an index is not an ASCII digit."""

    def __init__(self, index: int, character: str) -> None:
        super().__init__(
            f"The value at index {index} is {character!r} which is not a digit."
        )
        self.index = index
        self.character = character


class PairParseError(ReflowKitError, ValueError):
    """Raised when a key/value fragment does not contain its separator."""

    def __init__(self, fragment: str, pattern: str) -> None:
        super().__init__(f"No matches found in string: {fragment} with regex {pattern}")
        self.fragment = fragment
        self.pattern = pattern


# ============================================================================
#                           XML related errors
# ============================================================================


class XmlMergeError(ReflowKitError):
    """Raised when two XML trees cannot be merged."""


class AmbiguousElementError(XmlMergeError):
    """Raised when a lookup matches more than one element."""

    def __init__(self, description: str, count: int) -> None:
        super().__init__(
            f"More than one element match was found for {description} ({count} matches)"
        )
        self.description = description
        self.count = count


# ============================================================================
#                           Database related errors
# ============================================================================


class SqlUriError(ReflowKitError, ValueError):
    """Raised when a SQL Server connection URI cannot be interpreted."""

    def __init__(self, uri: str, reason: str) -> None:
        super().__init__(f"Not recognised as a SQL Server connection URI: {reason}")
        self.uri = uri
        self.reason = reason


# ============================================================================
#                           Reference data errors
# ============================================================================


class DuplicateSubdivisionError(ReflowKitError, ValueError):
    """Raised when a subdivision catalog is given the same code twice."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Duplicate subdivision code: {code}")
        self.code = code
