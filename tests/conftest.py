from __future__ import annotations

from collections.abc import Iterator

import pytest

from utilkit.date.clock import set_clock
from utilkit.settings import get_settings


@pytest.fixture(autouse=True)
def utc_local_zone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the local view to UTC and restore the system clock after each test."""
    monkeypatch.setenv("UTILKIT_TZ", "UTC")
    monkeypatch.delenv("UTILKIT_FILES_DIR", raising=False)
    get_settings.cache_clear()
    yield
    set_clock(None)
    get_settings.cache_clear()


@pytest.fixture
def new_york(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UTILKIT_TZ", "America/New_York")
    get_settings.cache_clear()
