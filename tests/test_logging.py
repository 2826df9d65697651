"""
Tests for structured logging.
"""

import logging

from clientkit.observability.logging import (
    StructuredFormatter,
    StructuredLogger,
    get_logger,
    setup_logging,
)


def _record(**fields) -> logging.LogRecord:
    record = logging.LogRecord(
        "clientkit.apis", logging.INFO, __file__, 10, "hello %s", ("world",), None, func="resolve"
    )
    for key, value in fields.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test key=value log line rendering."""

    def test_basic_fields(self):
        line = StructuredFormatter().format(_record())

        assert line.startswith("t=")
        assert " level=INFO " in line
        assert " mod=apis " in line
        assert " op=resolve " in line
        assert 'msg="hello world"' in line

    def test_op_overrides_function_name(self):
        line = StructuredFormatter().format(_record(op="settings.init"))
        assert " op=settings.init " in line
        assert "op=resolve" not in line

    def test_extra_fields_appended(self):
        line = StructuredFormatter().format(_record(address="/users", apis=2))
        assert line.endswith(" address=/users apis=2")


class TestStructuredLogger:
    """Test structured logger behavior."""

    def test_get_logger_is_cached(self):
        assert get_logger("tests.cached") is get_logger("tests.cached")
        assert isinstance(get_logger("tests.cached"), StructuredLogger)

    def test_fields_become_record_attributes(self, caplog):
        log = get_logger("tests.fields")
        with caplog.at_level(logging.DEBUG, logger="tests.fields"):
            log.debug("resolved", op="resolve", address="/users")

        record = caplog.records[-1]
        assert record.getMessage() == "resolved"
        assert record.op == "resolve"
        assert record.address == "/users"

    def test_reserved_fields_dropped(self, caplog):
        log = get_logger("tests.reserved")
        with caplog.at_level(logging.INFO, logger="tests.reserved"):
            log.info("message", name="shadow", module="shadow", component="test")

        record = caplog.records[-1]
        assert record.name == "tests.reserved"
        assert record.component == "test"

    def test_levels(self, caplog):
        log = get_logger("tests.levels")
        with caplog.at_level(logging.DEBUG, logger="tests.levels"):
            log.debug("d")
            log.info("i")
            log.warning("w")
            log.error("e")
            log.critical("c")

        assert [r.levelname for r in caplog.records] == [
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ]


class TestSetupLogging:
    """Test root logger configuration."""

    def test_explicit_level(self, root_logger):
        setup_logging("warning")

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, StructuredFormatter)

    def test_level_from_config(self, root_logger, monkeypatch):
        monkeypatch.setenv("CLIENTKIT_LOG_LEVEL", "debug")
        setup_logging()

        assert root_logger.level == logging.DEBUG
