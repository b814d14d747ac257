"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field


class FeeRequest(BaseModel):
    """Request body for POST /v1/fee"""

    term: int = Field(..., description="Loan term in months (12 or 24)")
    amount: Decimal = Field(
        ..., gt=0, max_digits=18, decimal_places=8, allow_inf_nan=False, description="Requested principal"
    )


class FeeResponse(BaseModel):
    """Response for POST /v1/fee"""

    term: int
    amount: Decimal
    fee: Decimal
    total_repayable: Decimal


class BreakpointSchema(BaseModel):
    """Single row of a fee table"""

    amount: Decimal
    fee: Decimal


class FeeTableSchema(BaseModel):
    """Fee table for one term"""

    term: int
    breakpoints: List[BreakpointSchema]


class FeeTablesResponse(BaseModel):
    """Response for GET /v1/fee/tables"""

    min_amount: Decimal
    max_amount: Decimal
    tables: List[FeeTableSchema]
