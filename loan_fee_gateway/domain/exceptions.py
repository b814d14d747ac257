"""Domain-specific exceptions"""

from decimal import Decimal


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidTermError(DomainException):
    """Loan term has no configured fee table"""

    def __init__(self, term: object):
        super().__init__(f"Unsupported loan term: {term!r}")
        self.term = term


class AmountOutOfRangeError(DomainException):
    """Requested amount cannot be priced against the fee tables"""

    def __init__(self, amount: object, minimum: Decimal, maximum: Decimal):
        super().__init__(
            f"Loan amount {amount} is outside the supported range {minimum}-{maximum}"
        )
        self.amount = amount
        self.minimum = minimum
        self.maximum = maximum
