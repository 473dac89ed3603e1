"""
Tests for correlation ID propagation and log record enrichment.

Dependencies: pytest, fastapi.testclient
System role: Verification of request tracing
"""

import logging

import pytest
from fastapi.testclient import TestClient

from enrollments_service.api.main import create_app
from enrollments_service.observability.correlation import (
    CORRELATION_ID_HEADER,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from enrollments_service.observability.logger import CorrelationIdFilter


@pytest.fixture
def client():
    return TestClient(create_app())


class TestCorrelationContext:
    """Test suite for the correlation ID context helpers."""

    def test_set_and_get(self):
        set_correlation_id("req-123")
        try:
            assert get_correlation_id() == "req-123"
        finally:
            clear_correlation_id()

    def test_set_without_value_generates_uuid(self):
        value = set_correlation_id()
        try:
            assert len(value) == 36
            assert get_correlation_id() == value
        finally:
            clear_correlation_id()

    def test_clear_resets_to_empty(self):
        set_correlation_id("req-123")
        clear_correlation_id()
        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Test suite for log record enrichment."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)

    def test_filter_attaches_current_id(self):
        set_correlation_id("req-456")
        try:
            record = self._record()
            assert CorrelationIdFilter().filter(record) is True
            assert record.correlation_id == "req-456"
        finally:
            clear_correlation_id()

    def test_filter_uses_placeholder_outside_request(self):
        clear_correlation_id()
        record = self._record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"


class TestCorrelationMiddleware:
    """Test suite for the correlation middleware."""

    def test_incoming_id_is_echoed(self, client):
        response = client.get("/api/v1/health", headers={CORRELATION_ID_HEADER: "req-789"})

        assert response.status_code == 200
        assert response.headers[CORRELATION_ID_HEADER] == "req-789"

    def test_missing_id_is_generated(self, client):
        response = client.get("/api/v1/health")

        assert len(response.headers[CORRELATION_ID_HEADER]) == 36

    def test_context_is_cleared_after_request(self, client):
        client.get("/api/v1/health", headers={CORRELATION_ID_HEADER: "req-789"})

        assert get_correlation_id() == ""
