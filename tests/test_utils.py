import logging

import pytest
from rich.logging import RichHandler

from optgroups.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode_uses_rich():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)


def test_json_mode_and_file(tmp_path):
    log_file = tmp_path / "optgroups.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("optgroups").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_mode_from_environment(monkeypatch):
    monkeypatch.setenv("OPTGROUPS_LOG_MODE", "json")
    setup_logging()
    assert not isinstance(logging.getLogger().handlers[0], RichHandler)


def test_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_no_file_handler_without_filename():
    setup_logging(mode="cli", json_log_to_file=True)
    assert not any(
        isinstance(handler, logging.FileHandler) for handler in logging.getLogger().handlers
    )


def test_plain_text_file_log(tmp_path):
    log_file = tmp_path / "optgroups.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    logging.getLogger("optgroups").info("plain")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "[optgroups] [INFO] plain" in log_file.read_text(encoding="UTF-8")


def test_invalid_mode_keeps_existing_handlers():
    before = list(logging.getLogger().handlers)
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
    assert logging.getLogger().handlers == before
