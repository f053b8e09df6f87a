import io

from rich.console import Console

from raylog.cli import main
from raylog.core.levels import LogLevel
from raylog.core.logging import Logger


def test_demo_prints_every_level(out):
    lg = Logger()
    lg.set_output(out)
    assert main(["--min-level", "debug", "--no-color", "demo"], log=lg) == 0
    text = out.getvalue()
    for label in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "FATAL"):
        assert f"[{label}] " in text
    assert "[DEBUG] Streamable\n" in text
    assert "NonStreamable at 0x" in text
    assert "[INFO] bytes\n" in text
    assert "plain output, never filtered\n" in text
    assert "[INFO] demo: " in text
    assert "\033[" not in text


def test_bad_min_level_is_reported(out):
    lg = Logger(color=False)
    lg.set_output(out)
    assert main(["--min-level", "loud", "demo"], log=lg) == 2
    assert out.getvalue().startswith("[ERROR] Unknown log level")


def test_demo_to_log_file(tmp_path):
    lg = Logger()
    assert main(["--log-dir", str(tmp_path), "--log-file", "demo.log", "demo"], log=lg) == 0
    text = (tmp_path / "demo.log").read_text(encoding="utf-8")
    assert "[INFO] Info level\n" in text
    assert "\033[" not in text
    assert lg.sink.file is None


def test_levels_table():
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    lg = Logger()
    lg.set_minimum_level("error")
    assert main(["levels"], log=lg, console=console) == 0
    table = buf.getvalue()
    for name in ("DEBUG", "INFO", "WARN", "ERROR", "CRITICAL", "FATAL", "LOG"):
        assert name in table
    assert "[OUT]" in table
    rows = {line.split("│")[1].strip(): line for line in table.splitlines() if line.count("│") > 2}
    assert "no" in rows["INFO"]
    assert "yes" in rows["ERROR"]


def test_levels_table_matches_admission():
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    lg = Logger(color=False)
    lg.set_minimum_level("log")
    assert main(["levels"], log=lg, console=console) == 0
    rows = {line.split("│")[1].strip(): line for line in buf.getvalue().splitlines() if line.count("│") > 2}
    for level in LogLevel:
        expected = "yes" if lg.levels.admit(level) else "no"
        assert rows[level.name].rstrip("│ ").endswith(expected)
    assert "no" in rows["CRITICAL"]
    assert "yes" in rows["FATAL"]
    assert "yes" in rows["LOG"]
