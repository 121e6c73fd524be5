"""Entry points (command-line interface)."""
