"""System Clock."""

import time


class SystemClock:
    """Clock 포트 구현체 (현재 UTC Unix timestamp)."""

    def now(self) -> int:
        return int(time.time())
