"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class LoanApplication:
    """Requested loan: term in months and principal amount"""

    term: int
    amount: Number


@dataclass(frozen=True)
class FeeBreakpoint:
    """Single row of a fee table"""

    amount: Decimal
    fee: Decimal


@dataclass(frozen=True)
class FeeQuote:
    """Output of a fee calculation"""

    term: int
    amount: Decimal
    fee: Decimal

    @property
    def total_repayable(self) -> Decimal:
        return self.amount + self.fee
