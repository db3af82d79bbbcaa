import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from gash.utils import CaseInsensitiveDict, ensure_async, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.asyncio
async def test_ensure_async_wraps_sync_function():
    def double(value):
        return value * 2

    wrapped = ensure_async(double)
    assert wrapped is not double
    assert await wrapped(4) == 8


def test_ensure_async_keeps_coroutine_function():
    async def double(value):
        return value * 2

    assert ensure_async(double) is double


def test_case_insensitive_dict():
    commands = CaseInsensitiveDict()
    commands["Look"] = 1
    assert "LOOK" in commands
    assert commands["look"] == 1
    assert commands.get("lOOk") == 1
    assert commands.pop("LOOK") == 1
    assert "look" not in commands


def test_setup_logging_cli(restore_root_logger):
    setup_logging(mode="cli", log_filename=None)
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_setup_logging_json_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "gash.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    handlers = restore_root_logger.handlers
    assert any(isinstance(h.formatter, JsonFormatter) for h in handlers)
    assert any(isinstance(h, logging.FileHandler) for h in handlers)
    logging.getLogger("gash").debug("hello")
    for handler in handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text()


def test_setup_logging_mode_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("GASH_LOG_MODE", "json")
    setup_logging(log_filename=None)
    assert not any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)
