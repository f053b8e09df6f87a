"""raylog: a thread-safe leveled console/file logger with named timers.

The functions exported here all act on one process-wide ``Logger``::

    import raylog
    raylog.info("loaded ", 3, " scenes\n")
    raylog.start_timer("render")
    ...
    raylog.log_duration("render")
"""
__all__ = [
    "Logger", "logger", "LogLevel", "TimeUnit", "TIMER_NOT_FOUND", "render",
    "log", "debug", "info", "warn", "warning", "error", "critical", "fatal",
    "set_minimum_level", "set_label", "set_color", "set_output",
    "enable_color", "disable_color",
    "start_timer", "end_timer", "get_timer", "log_duration", "log_duration_persistent",
    "init_log_file", "dump_log_file",
]
__version__ = "1.0.0"

from raylog.core.levels import LogLevel
from raylog.core.logging import Logger, logger
from raylog.core.render import render
from raylog.core.timers import TIMER_NOT_FOUND, TimeUnit

log = logger.log
debug = logger.debug
info = logger.info
warn = logger.warn
warning = logger.warning
error = logger.error
critical = logger.critical
fatal = logger.fatal

set_minimum_level = logger.set_minimum_level
set_label = logger.set_label
set_color = logger.set_color
set_output = logger.set_output
enable_color = logger.enable_color
disable_color = logger.disable_color

start_timer = logger.start_timer
end_timer = logger.end_timer
get_timer = logger.get_timer
log_duration = logger.log_duration
log_duration_persistent = logger.log_duration_persistent

init_log_file = logger.init_log_file
dump_log_file = logger.dump_log_file
