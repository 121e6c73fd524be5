"""Column access helpers for SQLAlchemy results.

Thin conveniences over :class:`sqlalchemy.engine.Result` and
:class:`sqlalchemy.engine.Row`: fetch a column by name or position, turn
``NULL`` into a fallback, and optionally convert the value on the way out.

Examples:
    ```py
    with engine.connect() as conn:
        result = conn.execute(text("SELECT id, name FROM users"))
        ids = get_column(result, "id", convert=int)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy.engine import Result, Row


def get_column_names(result: Result[Any]) -> list[str]:
    """Return the column names of ``result`` in select order."""
    return list(result.keys())


def get_value(
    row: Row[Any],
    column: str | int,
    fallback: Any = None,
    convert: Callable[[Any], Any] | None = None,
) -> Any:
    """Return one column of ``row``.

    Args:
        row: The result row.
        column: Column name or zero-based position.
        fallback: Returned when the column is ``NULL``.
        convert: Applied to non-``NULL`` values.

    Returns:
        The (converted) value, or ``fallback``.

    Raises:
        KeyError: If no column has that name.
        IndexError: If the position is out of range.
    """
    value = row[column] if isinstance(column, int) else row._mapping[column]  # pylint: disable=protected-access
    if value is None:
        return fallback
    return convert(value) if convert is not None else value


def get_column(
    result: Result[Any],
    column: str | int,
    fallback: Any = None,
    convert: Callable[[Any], Any] | None = None,
) -> list[Any]:
    """Read the remaining rows of ``result`` and return one column as a list.

    The result is consumed. See :func:`get_value` for the arguments.
    """
    return [get_value(row, column, fallback, convert) for row in result]
