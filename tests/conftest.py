"""Shared fixtures for predalgo tests."""

from __future__ import annotations

import os
import sys

import pytest

from predalgo._term import force_color


@pytest.fixture
def sample():
    """The sorted list used by the bisection scenarios."""
    return [1, 3, 3, 3, 5, 7]


@pytest.fixture(autouse=True, scope="session")
def _plain_output():
    force_color(False)
    yield
    force_color(None)


@pytest.fixture(autouse=True, scope="session")
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)
