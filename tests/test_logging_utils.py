"""Tests for the logging helpers."""

import logging
from pathlib import Path
from typing import Iterator

import pytest

import utils.logging_utils as logging_utils
from utils.logging_utils import configure_root_logger, get_logger


@pytest.fixture
def restore_root() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def _strip_handlers(root: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    # pytest attaches its capture handlers per phase, so clear them in the test body
    monkeypatch.setattr(root, "handlers", [])


class TestConfigureRootLogger:
    def test_writes_log_file(
        self,
        tmp_path: Path,
        restore_root: logging.Logger,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _strip_handlers(restore_root, monkeypatch)
        monkeypatch.setattr(logging_utils, "LOGS_DIR", tmp_path / "logs")
        configure_root_logger(
            level=logging.INFO, log_to_file=True, log_to_stdout=False, filename="t.log"
        )
        handlers = list(restore_root.handlers)
        try:
            assert len(handlers) == 1
            assert isinstance(handlers[0], logging.FileHandler)
            get_logger("tests.file").info("hello file")
            handlers[0].flush()
        finally:
            for handler in handlers:
                handler.close()
        text = (tmp_path / "logs" / "t.log").read_text(encoding="utf-8")
        assert "[INFO] tests.file: hello file" in text

    def test_stdout_only_by_default(
        self, restore_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _strip_handlers(restore_root, monkeypatch)
        configure_root_logger(level=logging.WARNING)
        assert len(restore_root.handlers) == 1
        assert type(restore_root.handlers[0]) is logging.StreamHandler
        assert restore_root.level == logging.WARNING

    def test_existing_handlers_only_adjust_level(
        self, restore_root: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        handler = logging.NullHandler()
        monkeypatch.setattr(restore_root, "handlers", [handler])
        configure_root_logger(level=logging.DEBUG, log_to_file=True)
        assert restore_root.handlers == [handler]
        assert restore_root.level == logging.DEBUG


def test_get_logger_is_cached() -> None:
    assert get_logger("tests.cache") is get_logger("tests.cache")
    assert get_logger().name == "__main__"
