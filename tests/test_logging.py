import io
import json
import logging

from emergency_fund.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    init_logging,
    request_id_ctx,
)


def _record(msg="rates loaded", **extra):
    record = logging.LogRecord(
        "emergency_fund.rates", logging.INFO, __file__, 1, msg, (), None
    )
    record.__dict__.update(extra)
    RequestIdFilter().filter(record)
    return record


def test_formatter_outside_request_uses_dash():
    entry = json.loads(JsonFormatter().format(_record()))
    assert entry["request_id"] == "-"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "emergency_fund.rates"
    assert entry["message"] == "rates loaded"
    assert entry["time"].endswith("Z")


def test_formatter_copies_known_context_fields_only():
    token = request_id_ctx.set("req-42")
    try:
        record = _record(quote="mep", rate=500.0, password="hunter2")
    finally:
        request_id_ctx.reset(token)
    entry = json.loads(JsonFormatter().format(record))
    assert entry["request_id"] == "req-42"
    assert entry["quote"] == "mep"
    assert entry["rate"] == 500.0
    assert "password" not in entry


def test_init_logging_writes_json_lines():
    stream = io.StringIO()
    root = logging.getLogger()
    previous = list(root.handlers), root.level
    try:
        init_logging(debug=False, stream=stream)
        logging.getLogger("emergency_fund.test").debug("hidden")
        logging.getLogger("emergency_fund.test").info(
            "shown", extra={"reason": "rate_unavailable"}
        )
    finally:
        root.handlers[:] = previous[0]
        root.setLevel(previous[1])
    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [line["message"] for line in lines] == ["shown"]
    assert lines[0]["reason"] == "rate_unavailable"


def test_request_line_logged_with_status(client):
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger("emergency_fund.request")
    logger.addHandler(handler)
    try:
        client.get("/health", headers={"x-request-id": "trace-7"})
    finally:
        logger.removeHandler(handler)
    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert entries[-1]["message"] == "GET /health -> 200"
    assert entries[-1]["request_id"] == "trace-7"
    assert entries[-1]["status_code"] == 200
    assert entries[-1]["path"] == "/health"
    assert entries[-1]["duration_ms"] >= 0
