from decimal import Decimal

import pytest

from core.schema import Asset, Settings
from data_prep.normalizer import normalize_asset
from engine.amortization import LoanPhase, LoanState, annual_pi_payment, loan_phase


def _loan(**fields) -> LoanState:
    data = {"name": "L", "purchaseYear": 2025, "purchaseMarketValue": 500000}
    data.update(fields)
    return LoanState.open(normalize_asset(Asset.model_validate(data), Settings()))


def test_annuity_payment_matches_closed_form():
    payment = annual_pi_payment(Decimal(400000), Decimal("0.06"), Decimal(27))
    expected = 400000 * 0.06 / (1 - 1.06 ** -27)
    assert float(payment) == pytest.approx(expected, rel=1e-12)


def test_payment_is_zero_without_repayment_years():
    assert annual_pi_payment(Decimal(400000), Decimal("0.06"), Decimal(0)) == 0
    assert annual_pi_payment(Decimal(400000), Decimal("0.06"), Decimal(-2)) == 0


def test_zero_rate_payment_is_straight_line():
    assert annual_pi_payment(Decimal(100000), Decimal(0), Decimal(10)) == Decimal(10000)


@pytest.mark.parametrize(
    "year_of_loan, expected",
    [
        (0, LoanPhase.PRE_PURCHASE),
        (1, LoanPhase.INTEREST_ONLY),
        (3, LoanPhase.INTEREST_ONLY),
        (4, LoanPhase.AMORTIZING),
        (30, LoanPhase.AMORTIZING),
        (31, LoanPhase.RETIRED),
    ],
)
def test_loan_phase_transitions(year_of_loan, expected):
    assert loan_phase(year_of_loan, Decimal(3), Decimal(30)) is expected


def test_interest_only_years_keep_balance():
    loan = _loan(loanAmount=400000, loanInterestRate=0.06, loanInterestOnlyPeriod=3, loanTermYears=30)

    for years_held in range(3):
        step = loan.advance(years_held)
        assert step.phase is LoanPhase.INTEREST_ONLY
        assert step.interest == Decimal(24000)
        assert step.principal == 0
        assert step.closing_balance == 400000


def test_zero_interest_loan_repays_evenly_and_ends_at_zero():
    loan = _loan(loanAmount=100000, loanInterestRate=0, loanInterestOnlyPeriod=0, loanTermYears=10)

    for years_held in range(10):
        step = loan.advance(years_held)
        assert step.interest == 0
        assert step.principal == Decimal(10000)
    assert loan.balance == 0

    after = loan.advance(10)
    assert after.phase is LoanPhase.RETIRED
    assert after.principal == after.interest == after.closing_balance == 0


def test_balance_is_monotonic_and_retires_after_term():
    loan = _loan(loanAmount=400000, loanInterestRate=0.06, loanInterestOnlyPeriod=3, loanTermYears=30)

    previous = loan.balance
    for years_held in range(40):
        step = loan.advance(years_held)
        assert step.closing_balance <= previous
        assert step.closing_balance >= 0
        previous = step.closing_balance
        if years_held + 1 > 30:
            assert step.phase is LoanPhase.RETIRED
            assert step.interest == step.principal == step.closing_balance == 0

    assert round(previous, 2) == 0


def test_interest_only_longer_than_term_never_amortizes():
    loan = _loan(loanAmount=200000, loanInterestRate=0.05, loanInterestOnlyPeriod=10, loanTermYears=5)
    assert loan.annual_payment == 0

    for years_held in range(5):
        step = loan.advance(years_held)
        assert step.phase is LoanPhase.INTEREST_ONLY
        assert step.closing_balance == 200000

    retired = loan.advance(5)
    assert retired.phase is LoanPhase.RETIRED
    assert retired.closing_balance == 0


def test_payment_below_interest_does_not_grow_balance():
    loan = LoanState(
        balance=Decimal(1000),
        annual_payment=Decimal(10),
        annual_rate=Decimal("0.1"),
        interest_only_years=Decimal(0),
        term_years=Decimal(10),
    )
    step = loan.advance(0)

    assert step.interest == Decimal(100)
    assert step.principal == 0
    assert step.closing_balance == 1000


def test_overpayment_is_clamped_to_remaining_balance():
    loan = LoanState(
        balance=Decimal(50),
        annual_payment=Decimal(1000),
        annual_rate=Decimal(0),
        interest_only_years=Decimal(0),
        term_years=Decimal(10),
    )
    step = loan.advance(4)

    assert step.principal == 50
    assert step.closing_balance == 0


def test_unencumbered_asset_pays_nothing():
    loan = _loan(loanAmount=0)
    step = loan.advance(0)

    assert step.interest == step.principal == step.closing_balance == 0
