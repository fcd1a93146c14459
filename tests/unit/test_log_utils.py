"""
Test suite for structured logging helpers.

System role: Verification of safe context logging
"""

import logging

import pytest

from picvoter.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from picvoter.observability.logger import configure_logging


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_none_should_render_as_text(self) -> None:
        assert safe_log_value(None) == "None"

    def test_collections_should_be_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_values_should_be_truncated(self) -> None:
        rendered = safe_log_value("x" * 600, max_length=10)
        assert rendered.startswith("x" * 10)
        assert "truncated, 600 total" in rendered


class TestLogWithContext:
    """Test suite for log_with_context()."""

    def test_context_should_be_attached_to_record(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = logging.getLogger("picvoter.test")
        with caplog.at_level(logging.INFO, logger="picvoter.test"):
            log_with_context(logger, logging.INFO, "Vote recorded", image_id="abc", upvotes=3)

        record = caplog.records[-1]
        assert record.image_id == "abc"
        assert record.upvotes == "3"

    def test_reserved_keys_should_be_prefixed(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = logging.getLogger("picvoter.test")
        with caplog.at_level(logging.INFO, logger="picvoter.test"):
            log_with_context(logger, logging.INFO, "Image inserted", filename="a.png")

        record = caplog.records[-1]
        assert record.ctx_filename == "a.png"
        assert record.filename != "a.png"

    def test_exception_context_should_include_error_type(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = logging.getLogger("picvoter.test")
        with caplog.at_level(logging.ERROR, logger="picvoter.test"):
            log_exception_with_context(logger, "failed", RuntimeError("boom"), operation="get")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.operation == "get"
        assert record.exc_info is not None


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_should_install_single_handler_with_level(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("warning")
            configure_logging("debug")

            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
