"""Unit tests for fee table configuration"""

import pytest
from decimal import Decimal
from loan_fee_gateway.domain.exceptions import InvalidTermError
from loan_fee_gateway.domain.fee_tables import (
    FEE_TABLES,
    MAX_LOAN_AMOUNT,
    MIN_LOAN_AMOUNT,
    FeeTable,
    Term,
    get_fee_table,
    resolve_term,
)


def test_reference_tables_match_published_fees():
    """Test both tables carry the published breakpoints and fees"""
    twelve = [bp.fee for bp in FEE_TABLES[Term.TWELVE_MONTHS].breakpoints]
    twenty_four = [bp.fee for bp in FEE_TABLES[Term.TWENTY_FOUR_MONTHS].breakpoints]

    assert twelve == [
        50, 90, 90, 115, 100, 120, 140, 160, 180, 200,
        220, 240, 260, 280, 300, 320, 340, 360, 380, 400,
    ]
    assert twenty_four == [
        70, 100, 120, 160, 200, 240, 280, 320, 360, 400,
        440, 480, 520, 560, 600, 640, 680, 720, 760, 800,
    ]

    for table in FEE_TABLES.values():
        assert list(table.amounts) == [Decimal(a) for a in range(1000, 20001, 1000)]


def test_tables_span_configured_range():
    """Smallest key is the minimum loan amount, largest the maximum"""
    for table in FEE_TABLES.values():
        assert table.min_amount == MIN_LOAN_AMOUNT == 1000
        assert table.max_amount == MAX_LOAN_AMOUNT == 20000


def test_get_fee_table_by_term():
    assert get_fee_table(12) is FEE_TABLES[Term.TWELVE_MONTHS]
    assert get_fee_table(24) is FEE_TABLES[Term.TWENTY_FOUR_MONTHS]
    assert get_fee_table(Term.TWENTY_FOUR_MONTHS).fee_at(Decimal(1000)) == 70


@pytest.mark.parametrize("term", [0, 6, 13, 36, -12, "12", None, True])
def test_unsupported_term_rejected(term):
    """Test no silent fallback to the 24-month table"""
    with pytest.raises(InvalidTermError):
        resolve_term(term)


def test_fee_table_rejects_unordered_breakpoints():
    with pytest.raises(ValueError):
        FeeTable([(2000, 90), (1000, 50)])


def test_fee_table_rejects_duplicate_breakpoints():
    with pytest.raises(ValueError):
        FeeTable([(1000, 50), (1000, 60)])


def test_fee_table_rejects_empty_and_negative():
    with pytest.raises(ValueError):
        FeeTable([])
    with pytest.raises(ValueError):
        FeeTable([(1000, -1)])


def test_fee_at_requires_exact_breakpoint():
    table = FeeTable([(1000, 50), (2000, 90)])
    assert table.fee_at(Decimal(2000)) == 90
    with pytest.raises(KeyError):
        table.fee_at(Decimal(1500))


def test_get_fee_table_from_custom_mapping():
    custom = FeeTable([(1000, 10), (20000, 20)])
    tables = {Term.TWELVE_MONTHS: custom}

    assert get_fee_table(12, tables) is custom
    with pytest.raises(InvalidTermError):
        get_fee_table(24, tables)
