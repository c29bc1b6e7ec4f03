"""
Loan amortization — fixed annual P&I payment plus a one-year balance step.

Per-loan life cycle, driven only by yearOfLoan (= yearsHeld + 1):
  PRE_PURCHASE -> INTEREST_ONLY -> AMORTIZING -> RETIRED

  1. yearOfLoan <= interest-only period: interest only, balance unchanged
  2. afterwards: fixed annuity payment over (term - IO) years, principal = payment - interest
  3. yearOfLoan > term: retired, balance forced to 0
  4. full precision per loan; rounding happens only in pm/aggregator.py
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from core.utils import ONE, ZERO
from data_prep.normalizer import NormalizedAsset


class LoanPhase(str, Enum):
    PRE_PURCHASE = "prePurchase"
    INTEREST_ONLY = "interestOnly"
    AMORTIZING = "amortizing"
    RETIRED = "retired"


def annual_pi_payment(principal: Decimal, annual_rate: Decimal, years: Decimal) -> Decimal:
    """
    Standard level annual payment (PMT) that repays `principal` over `years`.
    Zero when there are no repayment years; straight-line when the rate is zero.
    """
    if years <= 0:
        return ZERO
    if annual_rate == 0:
        return principal / years
    growth = ONE + annual_rate
    if growth <= 0:
        return ZERO
    denom = ONE - growth ** -years
    if denom == 0:
        return ZERO
    return principal * annual_rate / denom


def loan_phase(year_of_loan: int, interest_only_years: Decimal, term_years: Decimal) -> LoanPhase:
    if year_of_loan < 1:
        return LoanPhase.PRE_PURCHASE
    if year_of_loan > term_years:
        return LoanPhase.RETIRED
    if year_of_loan <= interest_only_years:
        return LoanPhase.INTEREST_ONLY
    return LoanPhase.AMORTIZING


@dataclass(frozen=True)
class LoanYear:
    """One year of a loan: what was paid and where the balance ended."""
    interest: Decimal
    principal: Decimal
    closing_balance: Decimal
    phase: LoanPhase


@dataclass
class LoanState:
    """
    Mutable per-asset loan state for a single forecast run.
    Created once before the year loop; advanced once per active year.
    """

    balance: Decimal
    annual_payment: Decimal
    annual_rate: Decimal
    interest_only_years: Decimal
    term_years: Decimal

    @classmethod
    def open(cls, asset: NormalizedAsset) -> "LoanState":
        pi_years = max(ZERO, asset.loan_term_years - asset.loan_interest_only_period)
        return cls(
            balance=asset.loan_amount,
            annual_payment=annual_pi_payment(asset.loan_amount, asset.loan_interest_rate, pi_years),
            annual_rate=asset.loan_interest_rate,
            interest_only_years=asset.loan_interest_only_period,
            term_years=asset.loan_term_years,
        )

    def advance(self, years_held: int) -> LoanYear:
        year_of_loan = years_held + 1
        phase = loan_phase(year_of_loan, self.interest_only_years, self.term_years)
        opening = self.balance

        if opening <= 0:
            interest = principal = ZERO
            closing = ZERO
        elif phase is LoanPhase.RETIRED:
            interest = principal = ZERO
            closing = ZERO
        elif phase is LoanPhase.INTEREST_ONLY:
            interest = opening * self.annual_rate
            principal = ZERO
            closing = opening
        else:
            interest = opening * self.annual_rate
            # payment below interest due would be negative amortization; final year may overpay
            principal = min(max(self.annual_payment - interest, ZERO), opening)
            closing = opening - principal

        self.balance = closing
        return LoanYear(
            interest=interest,
            principal=principal,
            closing_balance=closing,
            phase=phase,
        )
