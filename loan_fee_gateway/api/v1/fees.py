"""Fee endpoints: POST /v1/fee and GET /v1/fee/tables"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from loan_fee_gateway.api.v1.schemas import (
    BreakpointSchema,
    FeeRequest,
    FeeResponse,
    FeeTableSchema,
    FeeTablesResponse,
)
from loan_fee_gateway.api.dependencies import get_fee_calculator, get_request_id
from loan_fee_gateway.domain.exceptions import AmountOutOfRangeError, InvalidTermError
from loan_fee_gateway.domain.fees import FeeCalculator
from loan_fee_gateway.domain.models import LoanApplication
from loan_fee_gateway.infrastructure.observability.logging import log_fee_calculation
from loan_fee_gateway.infrastructure.observability.metrics import record_fee, record_rejection

router = APIRouter()


@router.post("/fee", response_model=FeeResponse)
def calculate_fee(
    request_body: FeeRequest,
    request_id: str = Depends(get_request_id),
    calculator: FeeCalculator = Depends(get_fee_calculator),
):
    """
    Quote the one-off fee for a loan application.

    The fee is interpolated from the term's breakpoint table and rounded up
    so that amount + fee is a multiple of 5.
    """
    start_time = time.perf_counter()
    application = LoanApplication(term=request_body.term, amount=request_body.amount)

    try:
        quote = calculator.quote(application)

    except InvalidTermError as e:
        record_rejection(request_body.term, "invalid_term")
        logging.warning(f"Invalid term: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except AmountOutOfRangeError as e:
        record_rejection(request_body.term, "out_of_range")
        logging.warning(f"Amount out of range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_fee(quote.term, quote.fee)
    log_fee_calculation(request_id, quote.term, quote.amount, quote.fee, duration_ms)

    return FeeResponse(
        term=quote.term,
        amount=quote.amount,
        fee=quote.fee,
        total_repayable=quote.total_repayable,
    )


@router.get("/fee/tables", response_model=FeeTablesResponse)
def get_fee_tables(calculator: FeeCalculator = Depends(get_fee_calculator)):
    """Return the configured breakpoint tables"""
    tables = [
        FeeTableSchema(
            term=int(term),
            breakpoints=[BreakpointSchema(amount=bp.amount, fee=bp.fee) for bp in table.breakpoints],
        )
        for term, table in sorted(calculator.tables.items())
    ]
    return FeeTablesResponse(
        min_amount=calculator.min_amount,
        max_amount=calculator.max_amount,
        tables=tables,
    )
