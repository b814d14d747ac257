"""Prometheus metrics for monitoring fee calculations and request latency"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

from loan_fee_gateway.domain.exceptions import InvalidTermError
from loan_fee_gateway.domain.fee_tables import resolve_term

UNSUPPORTED_TERM = "unsupported"

# Fee metrics
fee_calculation_counter = Counter(
    "loan_fee_calculation_total",
    "Total fee calculations",
    ["term", "outcome"],  # term: 12 | 24 | unsupported; outcome: ok | invalid_term | out_of_range
)

fee_amount_histogram = Histogram(
    "loan_fee_amount",
    "Distribution of calculated fees",
    ["term"],
    buckets=[50, 100, 200, 300, 400, 500, 600, 700, 800],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def term_label(term: object) -> str:
    """Fixed label value for a term: supported months, or "unsupported" for anything else"""
    try:
        return str(int(resolve_term(term)))
    except InvalidTermError:
        return UNSUPPORTED_TERM


def record_fee(term: int, fee: Decimal) -> None:
    """Record a successful calculation"""
    label = term_label(term)
    fee_calculation_counter.labels(term=label, outcome="ok").inc()
    fee_amount_histogram.labels(term=label).observe(float(fee))


def record_rejection(term: object, reason: str) -> None:
    """Record a calculation rejected by the domain layer"""
    fee_calculation_counter.labels(term=term_label(term), outcome=reason).inc()
