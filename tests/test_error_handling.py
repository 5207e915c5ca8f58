"""
Error handling and structured logging tests
"""

import json
import logging

import pytest

from readers_api.utils import error_handling
from readers_api.utils.error_handling import ErrorHandlingConfig, StructuredLogger


def test_sanitize_redacts_sensitive_keys():
    data = {
        "DB_PASSWORD": "secret-pass",
        "name": "Mia Corvere",
        "nested": [{"api_key": "abc", "email": "mia@redchurch.com"}],
    }

    sanitized = ErrorHandlingConfig.sanitize_data(data)

    assert sanitized == {
        "DB_PASSWORD": "***REDACTED***",
        "name": "Mia Corvere",
        "nested": [{"api_key": "***REDACTED***", "email": "mia@redchurch.com"}],
    }


def test_sanitize_truncates_large_bodies():
    body = "x" * (ErrorHandlingConfig.MAX_BODY_LOG_SIZE + 10)

    sanitized = ErrorHandlingConfig.sanitize_data(body)

    assert sanitized.endswith("...[TRUNCATED]")
    assert len(sanitized) == ErrorHandlingConfig.MAX_BODY_LOG_SIZE + len("...[TRUNCATED]")


def test_structured_log_entry(caplog):
    error_handling.endpoint_context_var.set("readers.update")

    with caplog.at_level(logging.WARNING, logger=error_handling.__name__):
        trace_id = StructuredLogger.log_error(
            "http_404",
            "HTTP 404: The reader does not exist.",
            extra_context={"password": "hunter2", "status_code": 404},
            level=logging.WARNING
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["trace_id"] == trace_id
    assert entry["level"] == "WARNING"
    assert entry["context"] == {"password": "***REDACTED***", "status_code": 404}
    assert entry["endpoint_context"] == "readers.update"


@pytest.mark.asyncio
async def test_not_found_is_logged_with_request_context(client, caplog):
    with caplog.at_level(logging.WARNING, logger=error_handling.__name__):
        response = await client.delete("/readers/345")

    assert response.status_code == 404
    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["error_type"] == "http_404"
    assert entry["request"]["method"] == "DELETE"
    assert entry["request"]["path"] == "/readers/345"
    assert entry["trace_id"] == response.json()["trace_id"] == response.headers["X-Trace-ID"]


@pytest.mark.asyncio
async def test_bad_path_id_logs_request_body(client, caplog):
    with caplog.at_level(logging.WARNING, logger=error_handling.__name__):
        response = await client.patch("/readers/not-a-number", json={"name": "Harry Potter"})

    assert response.status_code == 422
    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["error_type"] == "validation_error_422"
    assert "Harry Potter" in entry["context"]["request_body"]
