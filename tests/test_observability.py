"""Tests for event recorders and request context middlewares."""

import logging
from datetime import date
from unittest.mock import MagicMock

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from catalog.logging import get_log_context
from catalog.middlewares import CorrelationIDMiddleware, LoggingContextMiddleware
from catalog.middlewares.correlation_id import get_correlation_id
from catalog.observability import LoggingEventRecorder
from catalog.protocols import EventRecorder


class TestLoggingEventRecorder:
    """Tests for the log-backed recorder."""

    def test_logs_event_with_fields(self):
        """Test one log line per event with the fields as extra."""
        mock_logger = MagicMock()
        recorder = LoggingEventRecorder(logger=mock_logger)

        recorder.record(
            "author_listed", name="Austen, Jane", date_of_birth=date(1775, 12, 16)
        )

        level, message = mock_logger.log.call_args.args
        extra = mock_logger.log.call_args.kwargs["extra"]
        assert level == logging.INFO
        assert message == "author_listed: name: Austen, Jane, date_of_birth: 1775-12-16"
        assert extra["event"] == "author_listed"
        assert extra["event_name"] == "Austen, Jane"

    def test_event_without_fields(self):
        """Test an event with no fields logs just its name."""
        mock_logger = MagicMock()

        LoggingEventRecorder(logger=mock_logger, level=logging.DEBUG).record("ping")

        assert mock_logger.log.call_args.args == (logging.DEBUG, "ping")

    def test_satisfies_protocol(self):
        """Test the recorder implements EventRecorder."""
        assert isinstance(LoggingEventRecorder(), EventRecorder)


def _context_app():
    app = FastAPI()
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    @app.get("/context")
    async def context(request: Request):
        return {
            "state": request.state.request_id,
            "context_id": get_correlation_id(),
            "log_context": get_log_context(),
        }

    return app


class TestRequestContext:
    """Tests for correlation id and logging context middlewares."""

    def test_correlation_id_from_header(self):
        """Test a supplied id is truncated and echoed back."""
        client = TestClient(_context_app())

        response = client.get("/context", headers={"X-Correlation-ID": "abcdef123456"})

        assert response.headers["X-Correlation-ID"] == "abcdef12"
        assert response.json()["state"] == "abcdef12"
        assert response.json()["context_id"] == "abcdef12"

    def test_correlation_id_generated(self):
        """Test an id is generated when none is supplied."""
        client = TestClient(_context_app())

        response = client.get("/context")

        assert len(response.headers["X-Correlation-ID"]) == 8

    def test_log_context_carries_request(self):
        """Test endpoint and method are in the log context during a request."""
        client = TestClient(_context_app())

        response = client.get("/context")

        assert response.json()["log_context"]["endpoint"] == "/context"
        assert response.json()["log_context"]["method"] == "GET"
