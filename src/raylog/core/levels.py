from __future__ import annotations
from enum import IntEnum
from typing import Dict, Union

from colorama import Fore, Style

RESET = Style.RESET_ALL
UNDERLINE = "\033[4m"

class LogLevel(IntEnum):
    """Severity of a log call, ordered from least to most severe.

    ``LOG`` sits past ``FATAL`` but is never filtered: it is the level of
    plain ``log(...)`` output.
    """
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    CRITICAL = 4
    FATAL = 5
    LOG = 6

    @classmethod
    def parse(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        name = str(value).strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None

_ALIASES = {"WARNING": "WARN", "OUT": "LOG"}

DEFAULT_LABELS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
    LogLevel.FATAL: "FATAL",
    LogLevel.LOG: "OUT",
}

DEFAULT_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: Fore.CYAN,
    LogLevel.INFO: Fore.GREEN,
    LogLevel.WARN: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
    LogLevel.CRITICAL: Style.BRIGHT + Fore.RED,
    LogLevel.FATAL: UNDERLINE + Style.BRIGHT + Fore.RED,
    LogLevel.LOG: Fore.BLUE,
}

def color_code(name: str) -> str:
    """Resolve a colorama color name ("red", "bright_magenta", "light_blue") to its escape.

    Strings that already look like escapes are returned unchanged.
    """
    if name.startswith("\033"):
        return name
    key = name.strip().upper()
    prefix = ""
    if key.startswith("BRIGHT_"):
        prefix = Style.BRIGHT
        key = key[len("BRIGHT_"):]
    elif key.startswith("LIGHT_"):
        key = "LIGHT" + key[len("LIGHT_"):] + "_EX"
    if key == "RESET":
        return RESET
    code = getattr(Fore, key, None)
    if not isinstance(code, str):
        raise ValueError(f"Unknown color: {name!r}")
    return prefix + code
