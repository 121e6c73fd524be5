"""``reflowkit wrap`` — reflow text from a file or stdin.

Behavior
- Reads the whole input (``-`` for stdin), wraps it and writes the result to
  **stdout** without adding a trailing newline.
- ``--breaker`` and ``--hard-breaker`` accept backslash escapes (``\\n``,
  ``\\r\\n``, ``\\t``) so line terminators can be typed on a shell.

Failure modes
- Non-positive ``--width`` → ``BadParameter``.
- Invalid ``REFLOWKIT_WIDTH`` when ``--width`` is omitted → ``ClickException``.
"""

from __future__ import annotations

import logging
from typing import TextIO

import click

from reflowkit import config
from reflowkit.domain.errors import InvalidConfigurationError
from reflowkit.domain.reflow import wrap_with
from reflowkit.domain.value_objects import WrapConfig, WrapMethod

logger = logging.getLogger(__name__)


def _unescape(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str,
) -> str:
    """Click callback decoding backslash escapes such as ``\\n``."""
    try:
        return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as e:
        raise click.BadParameter(f"Invalid escape sequence in {value!r}") from e


def _resolve_width(width: int | None) -> int:
    if width is not None:
        return width
    try:
        return config.get_default_width()
    except InvalidConfigurationError as e:
        raise click.ClickException(str(e)) from e


@click.command("wrap")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--width",
    "-w",
    type=int,
    default=None,
    help=f"Maximum line width. Defaults to ${config.WIDTH_ENV_VAR} or {config.DEFAULT_WIDTH}.",
)
@click.option(
    "--method",
    "-m",
    type=click.Choice([m.value for m in WrapMethod], case_sensitive=False),
    default=WrapMethod.HARD_BREAK_WHEN_NECESSARY.value,
    show_default=True,
    help="Split overflowing words always, or only when wider than a line.",
)
@click.option(
    "--breaker",
    default="\\n",
    show_default=True,
    callback=_unescape,
    help="Text inserted at each line boundary.",
)
@click.option(
    "--hard-breaker",
    default="",
    callback=_unescape,
    help="Text inserted where a word is split mid-word (e.g. '-').",
)
def wrap_cmd(
    source: TextIO, width: int | None, method: str, breaker: str, hard_breaker: str
) -> None:
    """Wrap SOURCE (default: stdin) to a maximum line width."""
    text = source.read()
    try:
        wrap_config = WrapConfig(
            max_line_width=_resolve_width(width),
            method=WrapMethod(method.lower()),
            breaker=breaker,
            hard_breaker=hard_breaker,
        )
    except InvalidConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="'--width'") from e

    result = wrap_with(text, wrap_config)
    logger.info(
        "Wrapped %d characters at width %d (%s) into %d characters",
        len(text),
        wrap_config.max_line_width,
        wrap_config.method.value,
        len(result),
    )
    click.echo(result, nl=False)
