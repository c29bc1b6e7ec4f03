import pytest

from core.schema import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_capital_growth_rate=5,
        default_income_growth_rate=3,
        default_expense_growth_rate=3,
        default_loan_to_value_ratio=80,
        default_loan_interest_rate=5,
        default_loan_interest_only_period=3,
        default_loan_term_years=30,
        default_principal_residence_loan_term_years=20,
    )


@pytest.fixture
def scenario_asset() -> dict:
    return {
        "name": "Investment Property A",
        "type": "investmentProperty",
        "purchaseYear": 2025,
        "purchaseMarketValue": 500000,
        "capitalGrowthRate": 0.05,
        "loanAmount": 400000,
        "loanInterestRate": 0.06,
        "loanInterestOnlyPeriod": 3,
        "loanTermYears": 30,
        "incomePerYear": 26000,
        "incomeGrowthRate": 0,
        "expensesPerYear": 8000,
        "expenseGrowthRate": 0,
    }
