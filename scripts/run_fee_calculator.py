"""
Example: fee for a 24-month loan of 2750.

Usage:
    python scripts/run_fee_calculator.py [term] [amount]
"""

import sys
from loan_fee_gateway.domain.fees import FeeCalculator
from loan_fee_gateway.domain.models import LoanApplication


def main(argv: list[str]) -> None:
    term = int(argv[1]) if len(argv) > 1 else 24
    amount = argv[2] if len(argv) > 2 else "2750"

    calculator = FeeCalculator()
    application = LoanApplication(term=term, amount=float(amount))

    print(calculator.calculate_for(application))  # 24 / 2750 -> 115.0


if __name__ == "__main__":
    main(sys.argv)
