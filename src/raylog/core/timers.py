from __future__ import annotations
import time
from enum import Enum
from typing import Dict, List, Optional, Union

TIMER_NOT_FOUND = -1


class TimeUnit(Enum):
    NANOSECONDS = (1, "ns")
    MICROSECONDS = (1_000, "us")
    MILLISECONDS = (1_000_000, "ms")
    SECONDS = (1_000_000_000, "s")
    MINUTES = (60_000_000_000, "min")
    HOURS = (3_600_000_000_000, "h")

    def __init__(self, nanos: int, suffix: str):
        self.nanos = nanos
        self.suffix = suffix

    def convert(self, elapsed_ns: int) -> int:
        """Truncate a nanosecond count to this unit."""
        return elapsed_ns // self.nanos

    @classmethod
    def parse(cls, value: Union["TimeUnit", str]) -> "TimeUnit":
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for unit in cls:
            if key.upper() == unit.name or key.lower() == unit.suffix:
                return unit
        raise ValueError(f"Unknown time unit: {value!r}")


class TimerRegistry:
    """Named start points on the monotonic clock.

    Like LevelRegistry this holds no lock of its own; callers go through
    the Logger's gate.
    """

    def __init__(self, clock=time.perf_counter_ns):
        self._clock = clock
        self._starts: Dict[str, int] = {}

    def start(self, label: str) -> str:
        self._starts[label] = self._clock()
        return label

    def peek(self, label: str) -> Optional[int]:
        now = self._clock()
        start = self._starts.get(label)
        if start is None:
            return None
        return now - start

    def consume(self, label: str) -> Optional[int]:
        now = self._clock()
        start = self._starts.pop(label, None)
        if start is None:
            return None
        return now - start

    def labels(self) -> List[str]:
        return sorted(self._starts)

    def __contains__(self, label: object) -> bool:
        return label in self._starts
