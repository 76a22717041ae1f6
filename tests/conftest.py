"""Canonical test fixtures used across all engine tests.

Fixture: 1,000,000 car, 20% down, 60 months at 3.5% flat.
Ownership costs: 25K insurance, 650 act, 1.6K road tax, 6K maintenance per
year, 3K fuel per month.
"""

import pytest

from carcost.models.loan import DownPaymentKind, LoanParameters


@pytest.fixture
def canonical_params() -> LoanParameters:
    """Default calculator inputs, every cost populated."""
    return LoanParameters(
        car_price=1_000_000,
        down_payment_kind=DownPaymentKind.PERCENT,
        down_payment_value=20,
        term_months=60,
        annual_interest_rate_percent=3.5,
        insurance_per_year=25_000,
        act_fee_per_year=650,
        road_tax_per_year=1_600,
        maintenance_per_year=6_000,
        fuel_per_month=3_000,
    )


@pytest.fixture
def loan_only_params() -> LoanParameters:
    """Same loan, no ownership costs."""
    return LoanParameters(
        car_price=1_000_000,
        down_payment_kind=DownPaymentKind.PERCENT,
        down_payment_value=20,
        term_months=60,
        annual_interest_rate_percent=3.5,
    )


@pytest.fixture
def odd_term_params() -> LoanParameters:
    """14-month term with a fixed down payment: last year is partial."""
    return LoanParameters(
        car_price=750_000,
        down_payment_kind=DownPaymentKind.FIXED,
        down_payment_value=150_000,
        term_months=14,
        annual_interest_rate_percent=2.79,
        insurance_per_year=18_000,
        act_fee_per_year=650,
        road_tax_per_year=1_600,
        maintenance_per_year=4_000,
        fuel_per_month=2_500,
    )
