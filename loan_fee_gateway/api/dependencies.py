"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_fee_gateway.config import settings
from loan_fee_gateway.domain.fees import FeeCalculator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_fee_calculator() -> FeeCalculator:
    """Provide a fee calculator over the reference tables"""
    return FeeCalculator(strict_bounds=settings.strict_bounds)
