"""Allow ``python -m reflowkit``."""

from reflowkit.entrypoints.cli.main import reflowkit

reflowkit()  # pylint: disable=no-value-for-parameter
