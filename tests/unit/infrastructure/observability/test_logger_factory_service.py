import io
import json
import logging

import pytest
import structlog

from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.observability import logger_factory_service
from task_tracker.infrastructure.observability.logger_factory_service import configure_logging, get_logger


@pytest.fixture
def log_buffer(monkeypatch):
    """Allow configure_logging() to run again and collect structlog output in memory."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(logger_factory_service, "_CONFIGURED", False)
    structlog.contextvars.clear_contextvars()
    buffer = io.StringIO()
    yield buffer
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def _configure(buffer: io.StringIO, **overrides) -> None:
    configure_logging(Settings(log_format="json", **overrides))
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=buffer))


def _records(buffer: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buffer.getvalue().splitlines() if line.strip()]


def test_module_level_logger_follows_later_configuration(log_buffer):
    # created at import time in real modules, before configure_logging() runs
    logger = get_logger("task_tracker.infrastructure.entrypoints.api.error_handlers")
    _configure(log_buffer)

    logger.error("Unhandled failure", error_type="OverflowError", error_details="int too large")

    [record] = _records(log_buffer)
    assert record["message"] == "Unhandled failure"
    assert record["level"] == "error"
    assert record["service"]
    assert record["error"] == {"type": "OverflowError", "details": "int too large"}
    assert record["context"]["component"] == "task_tracker.infrastructure.entrypoints.api.error_handlers"


def test_exception_detail_is_rendered_server_side(log_buffer):
    logger = get_logger("task_tracker.test")
    _configure(log_buffer)

    try:
        raise RuntimeError("password=hunter2")
    except RuntimeError as exc:
        logger.error("Unhandled failure", exc_info=exc)

    [record] = _records(log_buffer)
    assert "RuntimeError: password=hunter2" in record["extra"]["exception"]


def test_log_level_is_honoured(log_buffer):
    logger = get_logger("task_tracker.test")
    _configure(log_buffer, log_level="WARNING")

    logger.info("Task created")
    logger.warning("Request failed")

    assert [r["message"] for r in _records(log_buffer)] == ["Request failed"]
