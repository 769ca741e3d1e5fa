"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the test packages.
"""

import pytest
from aceyducey.events import EventEmitter


@pytest.fixture
def events():
    """A fresh event emitter for a game or transition under test."""
    return EventEmitter()
