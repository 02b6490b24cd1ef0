"""Shared fixtures for clisupport tests."""

import pytest

from clisupport import cli_utils


@pytest.fixture(autouse=True)
def _restore_default_diagnostics():
    """Undo any ``setup()`` a test performs."""
    saved = cli_utils._default
    yield
    cli_utils._default = saved
