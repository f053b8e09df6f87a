import io

from raylog.core.logging import Logger


def test_init_log_file_creates_and_redirects(tmp_path):
    lg = Logger()
    console = io.StringIO()
    lg.set_output(console)
    directory = tmp_path / "logs" / "nested"

    assert lg.init_log_file(str(directory), "t.log")
    assert not lg.color_enabled
    lg.info("to file\n")
    lg.dump_log_file()

    assert (directory / "t.log").read_text(encoding="utf-8") == "[INFO] to file\n"
    assert console.getvalue() == ""


def test_default_filename(tmp_path):
    lg = Logger(color=False)
    assert lg.init_log_file(str(tmp_path))
    lg.log("x")
    lg.dump_log_file()
    assert (tmp_path / "Log.log").read_text(encoding="utf-8") == "x"


def test_file_is_truncated_on_open(tmp_path):
    (tmp_path / "t.log").write_text("old contents\n", encoding="utf-8")
    lg = Logger(color=False)
    lg.init_log_file(str(tmp_path), "t.log")
    lg.info("new\n")
    lg.dump_log_file()
    assert (tmp_path / "t.log").read_text(encoding="utf-8") == "[INFO] new\n"


def test_dump_restores_console(tmp_path, capsys):
    lg = Logger(color=False)
    lg.init_log_file(str(tmp_path), "t.log")
    lg.dump_log_file()
    lg.info("back\n")
    assert capsys.readouterr().out == "[INFO] back\n"
    assert lg.sink.file is None


def test_dump_twice_is_noop(tmp_path, capsys):
    lg = Logger(color=False)
    lg.init_log_file(str(tmp_path), "t.log")
    lg.dump_log_file()
    lg.dump_log_file()
    lg.dump_log_file()
    assert capsys.readouterr().out == ""


def test_dump_without_file_is_noop(log, out):
    log.dump_log_file()
    log.info("still here\n")
    assert out.getvalue() == "[INFO] still here\n"


def test_reopen_closes_previous_file(tmp_path):
    lg = Logger(color=False)
    lg.init_log_file(str(tmp_path), "a.log")
    first = lg.sink.file
    lg.info("a\n")
    lg.init_log_file(str(tmp_path), "b.log")
    lg.info("b\n")
    lg.dump_log_file()
    assert first.closed
    assert (tmp_path / "a.log").read_text(encoding="utf-8") == "[INFO] a\n"
    assert (tmp_path / "b.log").read_text(encoding="utf-8") == "[INFO] b\n"


def test_dump_keeps_foreign_sink(tmp_path, out):
    lg = Logger(color=False)
    lg.init_log_file(str(tmp_path), "t.log")
    lg.set_output(out)
    lg.dump_log_file()
    lg.info("kept\n")
    assert out.getvalue() == "[INFO] kept\n"


def test_directory_failure_logs_error_and_keeps_sink(tmp_path, log, out):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")

    assert not log.init_log_file(str(blocker / "logs"), "t.log")
    text = out.getvalue()
    assert text.startswith("[ERROR] failed to open log file '")
    assert "t.log': " in text
    assert text.endswith("\n")

    log.info("still here\n")
    assert out.getvalue().endswith("[INFO] still here\n")
    assert log.sink.file is None


def test_color_stays_on_after_failed_open(tmp_path, color_log, out):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    color_log.init_log_file(str(blocker / "sub"))
    assert color_log.color_enabled


def test_nul_in_path_logs_error_instead_of_raising(log, out):
    assert not log.init_log_file("bad\0dir", "t.log")
    assert out.getvalue().startswith("[ERROR] failed to open log file '")
    assert log.sink.file is None

    log.info("still here\n")
    assert out.getvalue().endswith("[INFO] still here\n")


def test_nul_in_filename_logs_error(tmp_path, log, out):
    assert not log.init_log_file(str(tmp_path), "t\0.log")
    assert out.getvalue().startswith("[ERROR] failed to open log file '")
