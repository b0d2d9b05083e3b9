from __future__ import annotations

import pytest

from mvckit.app.container import reset_core


@pytest.fixture(autouse=True)
def _fresh_core():
    """Every test starts and ends with empty singleton slots."""
    reset_core()
    yield
    reset_core()
