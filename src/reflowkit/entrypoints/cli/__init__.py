"""The ``reflowkit`` command-line interface."""
