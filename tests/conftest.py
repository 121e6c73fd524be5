"""Global pytest fixtures for REFLOWKIT."""

pytest_plugins = [
    "tests.fixtures.sqlite",
]
