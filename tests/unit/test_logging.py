"""Unit tests for correlation IDs and structured operation logging."""

import logging

import pytest

from dvc_pricing.models import QuoteRequest
from dvc_pricing.services.quote import PointsQuoteService
from dvc_pricing.utils.logging import (
    CorrelationIdFilter,
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_quote_operation,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def clean_correlation_id() -> None:
    clear_correlation_id()


class TestCorrelationId:
    """Tests for correlation ID context management."""

    def test_set_keeps_given_id(self) -> None:
        assert set_correlation_id("abc-123") == "abc-123"
        assert get_correlation_id() == "abc-123"

    def test_set_generates_when_missing(self) -> None:
        cid = set_correlation_id(None)
        assert cid
        assert get_correlation_id() == cid

    def test_clear(self) -> None:
        set_correlation_id("abc-123")
        clear_correlation_id()
        assert get_correlation_id() is None

    def test_formatter_prefixes_id(self) -> None:
        set_correlation_id("req-1")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
        CorrelationIdFilter().filter(record)

        assert StructuredFormatter("%(message)s").format(record) == "[req-1] hello"

    def test_get_logger_adds_filter_once(self) -> None:
        logger = get_logger("dvc_pricing.tests.logging")
        get_logger("dvc_pricing.tests.logging")
        assert sum(isinstance(f, CorrelationIdFilter) for f in logger.filters) == 1


class TestLogQuoteOperation:
    """Tests for log_quote_operation levels and context."""

    def test_success_logs_info(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("dvc_pricing.tests.ops")
        with caplog.at_level(logging.INFO, logger="dvc_pricing.tests.ops"):
            log_quote_operation(logger, "quote_stay", resort_code="BLT", nights=2, total_points=28)

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert "resort_code=BLT" in record.getMessage()
        assert record.total_points == 28  # type: ignore[attr-defined]

    def test_warnings_log_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("dvc_pricing.tests.ops")
        with caplog.at_level(logging.INFO, logger="dvc_pricing.tests.ops"):
            log_quote_operation(logger, "quote_stay", warnings=2)
        assert caplog.records[-1].levelno == logging.WARNING

    def test_error_logs_error(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("dvc_pricing.tests.ops")
        with caplog.at_level(logging.INFO, logger="dvc_pricing.tests.ops"):
            log_quote_operation(logger, "quote_stay", error="boom")
        assert caplog.records[-1].levelno == logging.ERROR

    def test_quote_logs_carry_correlation_id(
        self, quote_service: PointsQuoteService, caplog: pytest.LogCaptureFixture
    ) -> None:
        set_correlation_id("quote-req")
        with caplog.at_level(logging.INFO, logger="dvc_pricing.services.quote"):
            quote_service.quote_stay(
                QuoteRequest.model_validate(
                    {"resort_code": "BLT", "room": "STUDIO", "check_in": "2026-09-07", "nights": 1}
                )
            )

        records = [r for r in caplog.records if r.name == "dvc_pricing.services.quote"]
        assert records
        assert records[-1].correlation_id == "quote-req"  # type: ignore[attr-defined]

