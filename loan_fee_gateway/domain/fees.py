"""Fee engine - resolves the one-off fee for a loan application"""

import logging
from bisect import bisect_left, bisect_right
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR, localcontext
from typing import Dict, Sequence

from loan_fee_gateway.domain.exceptions import AmountOutOfRangeError
from loan_fee_gateway.domain.fee_tables import (
    FEE_TABLES,
    MAX_LOAN_AMOUNT,
    MIN_LOAN_AMOUNT,
    FeeTable,
    Term,
    get_fee_table,
    resolve_term,
)
from loan_fee_gateway.domain.models import FeeQuote, LoanApplication, Number

ROUNDING_STEP = Decimal(5)
INTERPOLATION_DIGITS = 28


def to_amount(value: Number) -> Decimal:
    """Convert a numeric input to Decimal (floats via their shortest repr)"""
    if isinstance(value, bool):
        raise TypeError("Loan amount must be a number, not bool")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def find_lower_bound(amount: Decimal, amounts: Sequence[Decimal], default: Decimal = MIN_LOAN_AMOUNT) -> Decimal:
    """Largest breakpoint <= amount, or `default` when amount is below every breakpoint"""
    idx = bisect_right(amounts, amount)
    if idx == 0:
        return default
    return amounts[idx - 1]


def find_upper_bound(amount: Decimal, amounts: Sequence[Decimal], default: Decimal = MAX_LOAN_AMOUNT) -> Decimal:
    """Smallest breakpoint >= amount, or `default` when amount is above every breakpoint"""
    idx = bisect_left(amounts, amount)
    if idx == len(amounts):
        return default
    return amounts[idx]


def interpolate_fee(amount: Decimal, lower: Decimal, upper: Decimal, table: FeeTable) -> Decimal:
    """
    Linear interpolation between two breakpoints.

    Requires lower < upper; equal bounds are an exact match and must be
    looked up directly.

    fee[lower] + (fee[upper] - fee[lower]) * (amount - lower) / (upper - lower),
    multiplied before dividing so the division is the only inexact step.
    """
    lower_fee = table.fee_at(lower)
    upper_fee = table.fee_at(upper)

    return lower_fee + (upper_fee - lower_fee) * (amount - lower) / (upper - lower)


def round_up_to_nearest_five(value: Decimal) -> Decimal:
    """Ceiling of value to a multiple of 5"""
    return (value / ROUNDING_STEP).to_integral_value(rounding=ROUND_CEILING) * ROUNDING_STEP


def working_precision(*operands: Decimal) -> int:
    """
    Significant digits needed to add the operands without rounding, plus
    INTERPOLATION_DIGITS of headroom for the interpolation quotient.

    Example:
        1E+30 and 400 -> 31 digits + headroom
        1000.00000000000000000000000001 and 20000 -> 31 digits + headroom
    """
    top = max(op.adjusted() for op in operands)
    bottom = min(min(op.as_tuple().exponent for op in operands), 0)
    return max(top - bottom, 0) + 1 + INTERPOLATION_DIGITS


class FeeCalculator:
    """
    Calculates loan fees from per-term breakpoint tables.

    Fee resolution:
    - Pick the table for the term (12 or 24 months, nothing else)
    - Find the closest breakpoints below and above the amount
    - Exact breakpoint: use its fee; otherwise interpolate linearly
    - Round so that amount + fee is a multiple of 5 (rounding up)

    Amounts outside min_amount..max_amount clamp to the boundary breakpoint
    unless `strict_bounds` is set, in which case AmountOutOfRangeError is raised.
    """

    def __init__(
        self,
        tables: Dict[Term, FeeTable] | None = None,
        min_amount: Decimal = MIN_LOAN_AMOUNT,
        max_amount: Decimal = MAX_LOAN_AMOUNT,
        strict_bounds: bool = False,
    ):
        self.tables = FEE_TABLES if tables is None else tables
        self.min_amount = min_amount
        self.max_amount = max_amount
        self.strict_bounds = strict_bounds

        for term, table in self.tables.items():
            if table.min_amount != min_amount or table.max_amount != max_amount:
                raise ValueError(
                    f"Fee table for {int(term)} months must span {min_amount}-{max_amount}, "
                    f"got {table.min_amount}-{table.max_amount}"
                )

    def calculate(self, term: int, amount: Number) -> Decimal:
        """
        Resolve the fee for a term and principal amount.

        Raises:
            InvalidTermError: term has no fee table
            AmountOutOfRangeError: amount is not a positive finite number, or
                lies outside the configured range while strict_bounds is set
        """
        term = resolve_term(term)
        table = get_fee_table(term, self.tables)
        value = self._validate_amount(amount)

        lower = find_lower_bound(value, table.amounts, self.min_amount)
        upper = find_upper_bound(value, table.amounts, self.max_amount)

        # Sums stay exact; the interpolation quotient rounds down so the
        # final ceiling never lands below the true total
        operands = [value, self.min_amount, self.max_amount] + [bp.fee for bp in table.breakpoints]
        with localcontext() as ctx:
            ctx.prec = working_precision(*operands)
            ctx.rounding = ROUND_FLOOR

            if lower == upper:
                fee = table.fee_at(lower)
            else:
                fee = interpolate_fee(value, lower, upper, table)

            result = round_up_to_nearest_five(value + fee) - value

        logging.debug(
            "Fee resolved",
            extra={
                "term": int(term),
                "amount": str(value),
                "lower_bound": str(lower),
                "upper_bound": str(upper),
                "raw_fee": str(fee),
                "fee": str(result),
            },
        )
        return result

    def calculate_for(self, application: LoanApplication) -> Decimal:
        """Fee for a LoanApplication"""
        return self.calculate(application.term, application.amount)

    def quote(self, application: LoanApplication) -> FeeQuote:
        """Fee plus the normalised inputs, for callers that report totals"""
        fee = self.calculate_for(application)
        return FeeQuote(
            term=int(resolve_term(application.term)),
            amount=to_amount(application.amount),
            fee=fee,
        )

    def _validate_amount(self, amount: Number) -> Decimal:
        try:
            value = to_amount(amount)
        except (TypeError, ValueError, ArithmeticError):
            raise AmountOutOfRangeError(amount, self.min_amount, self.max_amount)

        if not value.is_finite() or value <= 0:
            raise AmountOutOfRangeError(amount, self.min_amount, self.max_amount)

        if self.strict_bounds and not (self.min_amount <= value <= self.max_amount):
            raise AmountOutOfRangeError(amount, self.min_amount, self.max_amount)

        return value


def calculate_fee(term: int, amount: Number, strict_bounds: bool = False) -> Decimal:
    """
    Main entry point: fee for (term, amount) using the reference tables.
    """
    return FeeCalculator(strict_bounds=strict_bounds).calculate(term, amount)
