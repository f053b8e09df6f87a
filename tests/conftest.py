import io
import pytest

from raylog.core.logging import Logger


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def log(out):
    """A fresh logger writing plain (uncolored) text to an in-memory stream."""
    lg = Logger(color=False)
    lg.set_output(out)
    yield lg
    lg.dump_log_file()


@pytest.fixture
def color_log(out):
    lg = Logger()
    lg.set_output(out)
    return lg
