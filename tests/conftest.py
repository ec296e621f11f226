"""Shared fixtures."""

from __future__ import annotations

import io

import pytest
from blessed import Terminal


@pytest.fixture()
def term():
    """A styling terminal that writes into an in-memory buffer."""
    return Terminal(
        kind="xterm-256color", stream=io.StringIO(), force_styling=True,
    )
