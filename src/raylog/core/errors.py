from __future__ import annotations

class RaylogError(Exception):
    """Raised by raylog for caller mistakes; runtime logging failures are logged instead."""

class InvalidSinkError(RaylogError, TypeError):
    def __init__(self, sink: object):
        super().__init__(f"Cannot log to {type(sink).__name__!r}: object has no callable write()")
        self.sink = sink

class SettingsError(RaylogError):
    """A settings file is missing, unreadable or holds unknown keys."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Unusable raylog settings in {path}: {reason}")
        self.path = path
        self.reason = reason
