from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from spatial_actuation.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_writes_file(tmp_path: Path, package_logger: logging.Logger) -> None:
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, str(log_file), stream=io.StringIO())
    assert len(package_logger.handlers) == 2
    logging.getLogger("spatial_actuation.core.model").info("hello")
    for handler in package_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_repeat_call_replaces_only_own_handlers(package_logger: logging.Logger) -> None:
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    setup_logging("debug", stream=io.StringIO())
    setup_logging("WARNING", stream=io.StringIO())
    assert foreign in package_logger.handlers
    assert len(package_logger.handlers) == 2
    assert package_logger.level == logging.WARNING
    package_logger.removeHandler(foreign)


def test_level_name_and_stream(package_logger: logging.Logger) -> None:
    out = io.StringIO()
    setup_logging("info", stream=out)
    logging.getLogger("spatial_actuation.core.connector").warning("stale binding")
    assert "WARNING" in out.getvalue()
    assert "stale binding" in out.getvalue()


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValueError):
        setup_logging("LOUD")
