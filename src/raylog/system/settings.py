from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, Optional

from raylog.core.errors import SettingsError
from raylog.core.levels import LogLevel, color_code
from raylog.core.logging import Logger, logger as global_logger

SETTINGS_FILENAME = "raylog.json"
COLOR_DISABLED_ENV = "RAYLOG_COLOR_DISABLED"

@dataclass
class SettingsData:
    minimum_level: str = "INFO"
    color: bool = True
    log_directory: Optional[str] = None   # set to log to <dir>/<log_filename>
    log_filename: str = "Log.log"
    labels: Dict[str, str] = field(default_factory=dict)
    colors: Dict[str, str] = field(default_factory=dict)   # color names or raw escapes

    def normalize(self):
        try:
            self.minimum_level = LogLevel.parse(self.minimum_level).name
        except ValueError:
            self.minimum_level = "INFO"
        self.color = bool(self.color)
        if not self.log_filename:
            self.log_filename = "Log.log"
        self.labels = {lvl: str(text) for lvl, text in dict(self.labels or {}).items() if _is_level(lvl)}
        self.colors = {lvl: str(col) for lvl, col in dict(self.colors or {}).items()
                       if _is_level(lvl) and _is_color(str(col))}

def _is_level(name: str) -> bool:
    try:
        LogLevel.parse(name)
    except ValueError:
        return False
    return True

def _is_color(name: str) -> bool:
    try:
        color_code(name)
    except ValueError:
        return False
    return True

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def load(cls, path: str | Path = SETTINGS_FILENAME, strict: bool = False) -> "Settings":
        path = Path(path)
        if path.exists():
            try:
                data = SettingsData(**json.loads(path.read_text(encoding="utf-8")))
                data.normalize()
                global_logger.debug("Loaded settings from ", path, "\n")
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                if strict:
                    raise SettingsError(str(path), str(e)) from e
                global_logger.warn("Failed to parse settings '", path, "', using defaults: ", e, "\n")
        elif strict:
            raise SettingsError(str(path), "file does not exist")
        return cls(SettingsData(), path)

    def save(self) -> bool:
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
        except OSError as e:
            global_logger.error("Failed to save settings '", self.path, "': ", e, "\n")
            return False
        global_logger.debug("Settings saved to ", self.path, "\n")
        return True

    def apply(self, target: Logger = global_logger) -> Logger:
        """Push these settings onto ``target`` (the process-wide logger by default)."""
        self.data.normalize()
        with target.gate:
            target.set_minimum_level(self.data.minimum_level)
            for lvl, text in self.data.labels.items():
                target.set_label(lvl, text)
            for lvl, col in self.data.colors.items():
                target.set_color(lvl, color_code(col))
            if self.data.log_directory is not None:
                target.init_log_file(self.data.log_directory, self.data.log_filename)
            if self.data.color and os.environ.get(COLOR_DISABLED_ENV) != "1" and target.sink.file is None:
                target.enable_color()
            else:
                target.disable_color()
        return target
