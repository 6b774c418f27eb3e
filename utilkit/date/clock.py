"""Single access point for "now".

Everything that defaults to the current instant reads it through now_ms(), so
tests can pin time with frozen_clock() instead of patching the system clock.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager


def system_clock() -> int:
    return time.time_ns() // 1_000_000


_clock: Callable[[], int] = system_clock


def now_ms() -> int:
    return int(_clock())


def set_clock(clock: Callable[[], int] | None) -> None:
    """Install a zero-argument callable returning epoch ms (None restores the system clock)."""
    global _clock
    _clock = clock or system_clock


@contextmanager
def frozen_clock(value: object) -> Iterator[int]:
    """Pin the clock to one instant for the duration of the block."""
    from .parsers import parse_date

    ms = parse_date(value).ms
    if ms is None:
        raise ValueError(f"Cannot freeze clock at an invalid date: {value!r}")

    previous = _clock
    set_clock(lambda: ms)
    try:
        yield ms
    finally:
        set_clock(previous)
