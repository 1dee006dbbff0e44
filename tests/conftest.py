"""Shared pytest fixtures and configuration for the kvctl test suite.

Guidelines
----------
* No network access in any test.
* TLS loading is mocked at the ``TLSLoader`` boundary unless a test is
  specifically about :class:`SSLContextLoader`.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def fake_loader() -> MagicMock:
    """A ``TLSLoader`` whose ``load`` returns a sentinel transport object."""
    loader = MagicMock()
    loader.load.return_value = object()
    return loader
