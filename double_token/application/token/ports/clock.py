"""Clock Port."""

from typing import Protocol


class Clock(Protocol):
    """현재 시각 제공자 인터페이스.

    구현체:
        - SystemClock (infrastructure/clock.py)
    """

    def now(self) -> int:
        """현재 Unix timestamp (초)."""
        ...
