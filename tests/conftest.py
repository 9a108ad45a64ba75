"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Iterator

import pytest

# The elapsed testing plugin is registered via a ``pytest11`` entry
# point (pyproject.toml) for external consumers.  In our own test
# suite we disable it (``-p no:elapsed``) and load explicitly here
# instead, because conftest-based loading is processed during
# ``pytest_load_initial_conftests``, after ``pytest-cov`` starts
# coverage tracing, so the elapsed import chain is measured.
pytest_plugins = ["elapsed.testing._plugin"]


@pytest.fixture
def _restore_root_logger() -> Iterator[None]:
    """Save and restore root logger handlers and level.

    Ensures tests that call ``configure_logging()`` (directly or via
    the CLI) don't leak handlers across subsequent tests.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for h in root.handlers:
        if h not in original_handlers:
            h.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
