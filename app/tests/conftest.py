"""Shared pytest fixtures for the translation engine test suite."""

import pytest

from infrastructure.i18n import CollectingSink


@pytest.fixture
def diagnostics():
    """Diagnostic sink collecting events emitted during a test."""
    return CollectingSink()
