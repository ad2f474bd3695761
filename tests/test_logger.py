import logging
from typing import Iterator

import pytest

from home_mcp import get_logger, setup_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("home_mcp")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def test_get_logger_namespaces() -> None:
    assert get_logger().name == "home_mcp"
    assert get_logger("server").name == "home_mcp.server"
    assert get_logger("home_mcp.dispatcher").name == "home_mcp.dispatcher"


def test_setup_logging_writes_to_stderr_only(
    package_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    setup_logging("debug")
    get_logger("test").debug("hello from the logger")

    captured = capsys.readouterr()
    assert "hello from the logger" in captured.err
    assert captured.out == ""
    assert package_logger.level == logging.DEBUG


def test_setup_logging_is_idempotent(package_logger: logging.Logger) -> None:
    setup_logging()
    setup_logging()

    stream_handlers = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
    assert len(stream_handlers) == 1
