from __future__ import annotations
from typing import Dict, Union

from raylog.core.levels import DEFAULT_COLORS, DEFAULT_LABELS, LogLevel, RESET


class LevelRegistry:
    """Per-level labels and colors plus the admission threshold.

    Not synchronized on its own; the owning Logger only touches it while
    holding its gate.
    """

    def __init__(self, minimum: LogLevel = LogLevel.INFO, color: bool = True):
        self.labels: Dict[LogLevel, str] = dict(DEFAULT_LABELS)
        self.colors: Dict[LogLevel, str] = dict(DEFAULT_COLORS)
        self.current = LogLevel.INFO
        self.minimum = minimum
        self.color_enabled = color

    def admit(self, level: LogLevel) -> bool:
        # fatal messages cannot be blocked, plain output is never filtered
        if level in (LogLevel.FATAL, LogLevel.LOG):
            return True
        return level >= self.minimum

    def set_minimum(self, level: Union[LogLevel, str]) -> LogLevel:
        self.minimum = LogLevel.parse(level)
        return self.minimum

    def set_label(self, level: Union[LogLevel, str], label: str):
        self.labels[LogLevel.parse(level)] = str(label)

    def set_color(self, level: Union[LogLevel, str], escape: str):
        self.colors[LogLevel.parse(level)] = str(escape)

    def label(self) -> str:
        return self.labels[self.current]

    def color(self) -> str:
        return self.colors[self.current] if self.color_enabled else ""

    def reset(self) -> str:
        return RESET if self.color_enabled else ""
