"""
Tests for structured logging.
"""

import json
import logging
import sys

from contactbook.shared.logging import StructuredFormatter, correlation_id_var, get_logger


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="contactbook.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_basic_fields(self) -> None:
        data = json.loads(StructuredFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "contactbook.test"
        assert data["message"] == "hello"
        assert "timestamp" in data

    def test_extra_fields_included(self) -> None:
        data = json.loads(StructuredFormatter().format(_record(contact_id=7)))

        assert data["contact_id"] == 7

    def test_correlation_id(self) -> None:
        token = correlation_id_var.set("cid-1")
        try:
            data = json.loads(StructuredFormatter().format(_record()))
        finally:
            correlation_id_var.reset(token)

        assert data["correlation_id"] == "cid-1"

    def test_exception_text(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredFormatter().format(record))

        assert "RuntimeError: boom" in data["exception"]


def test_get_logger_installs_single_handler() -> None:
    first = get_logger("contactbook.test.single")
    second = get_logger("contactbook.test.single")

    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0].formatter, StructuredFormatter)
