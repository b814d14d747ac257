"""Fee tables keyed by loan term"""

from decimal import Decimal
from enum import IntEnum
from typing import Dict, Iterable, Tuple

from loan_fee_gateway.domain.exceptions import InvalidTermError
from loan_fee_gateway.domain.models import FeeBreakpoint

MIN_LOAN_AMOUNT = Decimal(1000)
MAX_LOAN_AMOUNT = Decimal(20000)


class Term(IntEnum):
    """Supported loan terms in months"""

    TWELVE_MONTHS = 12
    TWENTY_FOUR_MONTHS = 24


class FeeTable:
    """
    Ordered breakpoint table for a single term.

    Breakpoints are kept as a tuple sorted by amount so lookups can bisect
    over `amounts`. Keys must be strictly increasing.
    """

    def __init__(self, rows: Iterable[Tuple[int, int]]):
        breakpoints = tuple(FeeBreakpoint(Decimal(amount), Decimal(fee)) for amount, fee in rows)
        if not breakpoints:
            raise ValueError("Fee table needs at least one breakpoint")

        for previous, current in zip(breakpoints, breakpoints[1:]):
            if current.amount <= previous.amount:
                raise ValueError(
                    f"Breakpoints must be strictly increasing: {previous.amount} then {current.amount}"
                )
        for bp in breakpoints:
            if bp.amount <= 0 or bp.fee < 0:
                raise ValueError(f"Invalid breakpoint {bp.amount} -> {bp.fee}")

        self._breakpoints = breakpoints
        self._fees: Dict[Decimal, Decimal] = {bp.amount: bp.fee for bp in breakpoints}
        self.amounts: Tuple[Decimal, ...] = tuple(bp.amount for bp in breakpoints)

    @property
    def breakpoints(self) -> Tuple[FeeBreakpoint, ...]:
        return self._breakpoints

    @property
    def min_amount(self) -> Decimal:
        return self.amounts[0]

    @property
    def max_amount(self) -> Decimal:
        return self.amounts[-1]

    def fee_at(self, amount: Decimal) -> Decimal:
        """Fee for an exact breakpoint (KeyError if `amount` is not one)"""
        return self._fees[amount]

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __repr__(self) -> str:
        return f"FeeTable({self.min_amount}..{self.max_amount}, {len(self)} breakpoints)"


def _rows(fees: Iterable[int]) -> Tuple[Tuple[int, int], ...]:
    # Reference tables step by 1000 from the minimum loan amount
    return tuple((1000 * (i + 1), fee) for i, fee in enumerate(fees))


FEE_TABLES: Dict[Term, FeeTable] = {
    Term.TWELVE_MONTHS: FeeTable(
        _rows([
            50, 90, 90, 115, 100, 120, 140, 160, 180, 200,
            220, 240, 260, 280, 300, 320, 340, 360, 380, 400,
        ])
    ),
    Term.TWENTY_FOUR_MONTHS: FeeTable(
        _rows([
            70, 100, 120, 160, 200, 240, 280, 320, 360, 400,
            440, 480, 520, 560, 600, 640, 680, 720, 760, 800,
        ])
    ),
}


def resolve_term(term: object) -> Term:
    """Map a raw term value to a supported Term, or raise InvalidTermError"""
    if isinstance(term, bool):
        raise InvalidTermError(term)
    try:
        return Term(term)
    except ValueError:
        raise InvalidTermError(term)


def get_fee_table(term: object, tables: Dict[Term, FeeTable] | None = None) -> FeeTable:
    """Fee table for a loan term (no fallback between terms)"""
    term = resolve_term(term)
    table = (FEE_TABLES if tables is None else tables).get(term)
    if table is None:
        raise InvalidTermError(term)
    return table
