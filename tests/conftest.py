"""Mini README: Shared pytest fixtures.

Settings are cached per process, so each test starts from a cleared cache to
keep ``monkeypatch``-driven environment overrides isolated.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from expense_splitter.configuration import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
