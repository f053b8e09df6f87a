from __future__ import annotations
import threading
from functools import wraps
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class Gate:
    """Re-entrant lock serializing every registry change and every sink write.

    A thread that already holds the gate may enter it again, which is what
    lets error paths (missing timer, unwritable log directory) log while a
    call is still in flight.
    """

    def __init__(self):
        self._lock = threading.RLock()

    def __enter__(self) -> "Gate":
        self._lock.acquire()
        return self

    def __exit__(self, *exc) -> None:
        self._lock.release()


def gated(method: F) -> F:
    """Run a method while holding ``self.gate``."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.gate:
            return method(self, *args, **kwargs)
    return wrapper  # type: ignore[return-value]
