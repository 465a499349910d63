"""Pytest configuration shared by all tests.

Keeps the tests independent of settings overrides in the developer's shell.
"""

import os

import pytest

FINTOOLS_ENV_VARS = [
    "FINTOOLS_CONFIG_DIR",
    "FINTOOLS_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolate_from_env():
    """Clear finance tools env vars for the duration of each test."""
    original_values = {}
    for var in FINTOOLS_ENV_VARS:
        if var in os.environ:
            original_values[var] = os.environ.pop(var)

    yield

    for var in FINTOOLS_ENV_VARS:
        os.environ.pop(var, None)
    os.environ.update(original_values)
