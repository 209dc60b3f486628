"""
Unit tests for the entry point
"""
import logging
import os
from unittest.mock import patch

import pytest

from grading_system import main as main_module
from grading_system.main import main, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Puts the root logger back the way the test found it."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


class TestSetupLogging:
    """Test setup_logging function"""

    def test_default_is_silent(self):
        with patch.dict(os.environ, {}, clear=True):
            setup_logging()
            root_logger = logging.getLogger()
            assert len(root_logger.handlers) == 1
            assert root_logger.level > logging.CRITICAL

    def test_level_1_info(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "1"}, clear=True):
            setup_logging()
            assert logging.getLogger().level == logging.INFO

    def test_level_2_debug(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "2"}, clear=True):
            setup_logging()
            assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_falls_back_to_silent(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "loud"}, clear=True):
            setup_logging()
            assert logging.getLogger().level > logging.CRITICAL

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "grading.log"
        with patch.dict(os.environ, {"LOG_FILE": str(log_file), "LOG_LEVEL": "1"}, clear=True):
            setup_logging()
            handler = logging.getLogger().handlers[0]
            assert isinstance(handler, logging.FileHandler)
            logging.getLogger("grading_system").info("hello")
            handler.flush()
            assert "hello" in log_file.read_text(encoding="utf-8")


class TestMain:
    """Test main()"""

    def test_main_runs_until_exit(self, monkeypatch, capsys):
        answers = iter(["1", "Alice", "4", "Alice", "10"])
        monkeypatch.setattr("builtins.input", lambda _="": next(answers))
        with patch.dict(os.environ, {}, clear=True):
            main()
        assert "Grade Report for Alice" in capsys.readouterr().out

    def test_keyboard_interrupt(self, monkeypatch, capsys):
        def _interrupt(_=""):
            raise KeyboardInterrupt
        monkeypatch.setattr("builtins.input", _interrupt)
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
        assert "Program terminated." in capsys.readouterr().out

    def test_unexpected_error(self, monkeypatch, capsys):
        def _boom(self):
            raise RuntimeError("boom")
        monkeypatch.setattr(main_module.GradingController, "starte_app", _boom)
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        assert "ERROR: boom" in capsys.readouterr().out
