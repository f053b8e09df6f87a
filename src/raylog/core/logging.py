"""
Process-wide leveled logger.

Each call renders its values, prefixes the first one with ``[LABEL] `` and
writes them all to the current sink while holding one re-entrant lock, so
output from concurrent threads never interleaves within a call.
"""
from __future__ import annotations
from pathlib import Path
from typing import IO, List, Optional, Union

from colorama import just_fix_windows_console

from raylog.core.gate import Gate, gated
from raylog.core.levels import LogLevel
from raylog.core.registry import LevelRegistry
from raylog.core.render import render
from raylog.core.sink import DEFAULT_LOG_FILENAME, SinkManager
from raylog.core.timers import TIMER_NOT_FOUND, TimerRegistry, TimeUnit

LevelLike = Union[LogLevel, str]
UnitLike = Union[TimeUnit, str]

_console_ready = False


def _prepare_console():
    global _console_ready
    if not _console_ready:
        just_fix_windows_console()
        _console_ready = True


class Logger:
    def __init__(self, level: LevelLike = LogLevel.INFO, color: bool = True):
        _prepare_console()
        self.gate = Gate()
        self.levels = LevelRegistry(LogLevel.parse(level), color)
        self.sink = SinkManager()
        self.timers = TimerRegistry()

    # --- output -------------------------------------------------------
    def _emit(self, text: str, with_label: bool):
        reg = self.levels
        color, reset = reg.color(), reg.reset()
        if with_label:
            self.sink.write(f"{color}[{reg.label()}] {reset}")
        self.sink.write(f"{color}{text}{reset}")

    @gated
    def _log(self, level: LogLevel, with_label: bool, values: tuple):
        if not self.levels.admit(level):
            return
        self.levels.current = level
        for i, value in enumerate(values):
            self._emit(render(value), with_label and i == 0)
        if values:
            self.sink.flush()

    def log(self, *values):
        """Plain output, or leveled output when the first value is a LogLevel.

        ``log("x")`` is never filtered and carries no label;
        ``log(LogLevel.WARN, "x")`` behaves like ``warn("x")``.
        """
        if values and isinstance(values[0], LogLevel):
            self._log(values[0], True, values[1:])
        else:
            self._log(LogLevel.LOG, False, values)

    def debug(self, *values): self._log(LogLevel.DEBUG, True, values)
    def info(self, *values): self._log(LogLevel.INFO, True, values)
    def warn(self, *values): self._log(LogLevel.WARN, True, values)
    def error(self, *values): self._log(LogLevel.ERROR, True, values)
    def critical(self, *values): self._log(LogLevel.CRITICAL, True, values)
    def fatal(self, *values): self._log(LogLevel.FATAL, True, values)

    warning = warn

    # --- levels, labels, colors ---------------------------------------
    @gated
    def set_minimum_level(self, level: LevelLike) -> LogLevel:
        return self.levels.set_minimum(level)

    @property
    @gated
    def minimum_level(self) -> LogLevel:
        return self.levels.minimum

    @gated
    def set_label(self, level: LevelLike, label: str):
        self.levels.set_label(level, label)

    @gated
    def get_label(self, level: LevelLike) -> str:
        return self.levels.labels[LogLevel.parse(level)]

    @gated
    def set_color(self, level: LevelLike, escape: str):
        self.levels.set_color(level, escape)

    @gated
    def get_color(self, level: LevelLike) -> str:
        return self.levels.colors[LogLevel.parse(level)]

    @gated
    def enable_color(self):
        self.levels.color_enabled = True

    @gated
    def disable_color(self):
        self.levels.color_enabled = False

    @property
    @gated
    def color_enabled(self) -> bool:
        return self.levels.color_enabled

    # --- sinks --------------------------------------------------------
    @gated
    def set_output(self, stream: IO[str]):
        """Send later output to ``stream``. The caller keeps ownership of it."""
        self.sink.redirect(stream)

    @gated
    def init_log_file(self, directory: Union[str, Path], filename: str = DEFAULT_LOG_FILENAME) -> bool:
        """Log to ``directory/filename`` (truncated) with color turned off.

        Failures are reported at ERROR on the current sink, which stays in
        place.
        """
        try:
            self.sink.open_file(directory, filename)
        except (OSError, ValueError) as e:  # ValueError: embedded NUL in the path
            self.error("failed to open log file '", Path(directory or ".") / filename, "': ",
                       getattr(e, "strerror", None) or e, "\n")
            return False
        self.levels.color_enabled = False
        return True

    @gated
    def dump_log_file(self):
        """Close the log file, if any, and go back to the console."""
        self.sink.close_file()

    # --- timers -------------------------------------------------------
    @gated
    def start_timer(self, label: str) -> str:
        return self.timers.start(label)

    @gated
    def end_timer(self, label: str, unit: UnitLike = TimeUnit.MILLISECONDS) -> int:
        """Stop the timer ``label`` and return its elapsed time in ``unit``.

        Returns ``TIMER_NOT_FOUND`` (after logging an error) for unknown labels.
        """
        unit = TimeUnit.parse(unit)
        return self._elapsed(label, unit, self.timers.consume(label))

    @gated
    def get_timer(self, label: str, unit: UnitLike = TimeUnit.MILLISECONDS) -> int:
        """Like ``end_timer`` but the timer keeps running."""
        unit = TimeUnit.parse(unit)
        return self._elapsed(label, unit, self.timers.peek(label))

    def _elapsed(self, label: str, unit: TimeUnit, elapsed_ns: Optional[int]) -> int:
        if elapsed_ns is None:
            self.error("Label ", label, " not found!\n")
            return TIMER_NOT_FOUND
        return unit.convert(elapsed_ns)

    @gated
    def log_duration(self, label: str, prefix: str = "", suffix: Optional[str] = None,
                     unit: UnitLike = TimeUnit.MILLISECONDS, level: LevelLike = LogLevel.INFO):
        self._log_elapsed(self.end_timer(label, unit), label, prefix, suffix, unit, level)

    @gated
    def log_duration_persistent(self, label: str, prefix: str = "", suffix: Optional[str] = None,
                                unit: UnitLike = TimeUnit.MILLISECONDS, level: LevelLike = LogLevel.INFO):
        self._log_elapsed(self.get_timer(label, unit), label, prefix, suffix, unit, level)

    def _log_elapsed(self, duration: int, label: str, prefix: str, suffix: Optional[str],
                     unit: UnitLike, level: LevelLike):
        if duration == TIMER_NOT_FOUND:
            return
        if suffix is None:
            suffix = TimeUnit.parse(unit).suffix
        self._log(LogLevel.parse(level), True, (prefix or f"{label}: ", duration, suffix, "\n"))

    @gated
    def active_timers(self) -> List[str]:
        return self.timers.labels()


logger = Logger(LogLevel.INFO)
