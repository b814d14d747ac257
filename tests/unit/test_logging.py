"""Unit tests for structured logging"""

import json
import logging
from decimal import Decimal
from loan_fee_gateway.infrastructure.observability.logging import (
    CustomJsonFormatter,
    log_fee_calculation,
)


def test_json_formatter_adds_service_metadata():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("fees", logging.INFO, __file__, 1, "Fee calculated", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Fee calculated"
    assert payload["level"] == "INFO"
    assert payload["service"] == "loan-fee-gateway"
    assert payload["timestamp"]


def test_log_fee_calculation_fields(caplog):
    with caplog.at_level(logging.INFO):
        log_fee_calculation("req-1", 24, Decimal("2750"), Decimal("115"), 1.5)

    record = caplog.records[-1]
    assert record.getMessage() == "Fee calculated"
    assert record.request_id == "req-1"
    assert record.term == 24
    assert record.amount == "2750"
    assert record.fee == "115"
