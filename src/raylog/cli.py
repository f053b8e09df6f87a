from __future__ import annotations
import argparse
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from raylog.core.levels import LogLevel
from raylog.core.logging import Logger, logger as global_logger
from raylog.system.settings import Settings


class Streamable:
    def __str__(self):
        return "Streamable"


class NonStreamable:
    pass


def _demo(log: Logger):
    """Exercise every level and each rendering path."""
    log.debug("Debug level\n")
    log.info("Info level\n")
    log.warn("Warn level\n")
    log.error("Error level\n")
    log.critical("Critical level\n")
    log.fatal("Fatal level\n")

    log.debug(Streamable(), "\n")
    log.info(NonStreamable(), "\n")
    log.critical(Streamable(), "\n")

    log.info(b"bytes", "\n")
    log.info(bytearray(b"bytearray"), "\n")
    log.log("plain output, never filtered\n")

    label = log.start_timer("demo")
    log.log_duration(label, unit="us")


def _levels_table(log: Logger) -> Table:
    table = Table(title="raylog levels")
    table.add_column("Level")
    table.add_column("Value", justify="right")
    table.add_column("Label")
    table.add_column("Admitted")
    with log.gate:
        for level in LogLevel:
            label = log.get_label(level)
            sample = Text.from_ansi(f"{log.get_color(level)}[{label}]\033[0m") if log.color_enabled else Text(f"[{label}]")
            admitted = log.levels.admit(level)
            table.add_row(level.name, str(int(level)), sample, "yes" if admitted else "no")
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raylog", description="Leveled console/file logger demo")
    parser.add_argument("--settings", help="JSON settings file to apply first")
    parser.add_argument("--min-level", help="minimum level to print (DEBUG, INFO, WARN, ...)")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--log-dir", help="write to a log file in this directory")
    parser.add_argument("--log-file", default="Log.log", help="log file name (default: Log.log)")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo", help="log one line per level and a few rendered values")
    sub.add_parser("levels", help="show labels, colors and admission per level")
    return parser


def main(argv: Optional[Sequence[str]] = None, log: Logger = global_logger,
         console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.settings:
        Settings.load(args.settings).apply(log)
    if args.min_level:
        try:
            log.set_minimum_level(args.min_level)
        except ValueError as e:
            log.error(e, "\n")
            return 2
    if args.no_color:
        log.disable_color()
    if args.log_dir and not log.init_log_file(args.log_dir, args.log_file):
        return 1

    try:
        if args.command == "levels":
            (console or Console()).print(_levels_table(log))
        else:
            _demo(log)
    finally:
        log.dump_log_file()
    return 0