"""Global pytest fixtures for ROSTER."""

pytest_plugins = [
    "tests.fixtures.sqlite",
]
