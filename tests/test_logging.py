"""Tests for logging setup."""

import inspect
import logging
from logging.handlers import RotatingFileHandler

import pytest

from hypewatch.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    urllib3_level = logging.getLogger("urllib3").level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(urllib3_level)


class TestConfigureLogging:
    def test_stdout_only(self):
        configure_logging(level="debug", output="stdout", log_format="text")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler]

    def test_file_output_creates_directory(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        configure_logging(level="INFO", output="both", file_path=str(log_file), log_format="json")

        logging.getLogger("hw.test").info("hello")

        handlers = logging.getLogger().handlers
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)
        for handler in handlers:
            handler.flush()
        assert '"message": "hello"' in log_file.read_text(encoding="utf-8")

    def test_urllib3_kept_quiet(self):
        configure_logging(level="DEBUG", output="stdout")
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_accepts_only_root_options(self):
        params = list(inspect.signature(configure_logging).parameters)
        assert params == ["level", "output", "file_path", "log_format"]
