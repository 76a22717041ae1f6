"""Flat-rate loan resolution.

Interest is charged once on the original principal for the full term and
spread evenly over the months. No reducing balance.
"""

from carcost.models.loan import DownPaymentKind, LoanParameters
from carcost.models.results import ResolvedLoan


def down_payment(params: LoanParameters) -> float:
    if params.down_payment_kind is DownPaymentKind.PERCENT:
        return params.car_price * params.down_payment_value / 100
    return params.down_payment_value


def flat_interest(loan_amount: float, annual_rate_percent: float, term_months: int) -> float:
    """Total interest over the term: principal x rate x years (years not rounded)."""
    years = term_months / 12
    return loan_amount * (annual_rate_percent / 100) * years


def resolve_loan(params: LoanParameters) -> ResolvedLoan:
    """Derive principal, interest and the constant monthly payment.

    Expects validated params (term_months >= 1).
    """
    dp = down_payment(params)
    loan_amount = params.car_price - dp
    total_interest = flat_interest(
        loan_amount, params.annual_interest_rate_percent, params.term_months
    )
    total_with_interest = loan_amount + total_interest

    return ResolvedLoan(
        down_payment=dp,
        loan_amount=loan_amount,
        total_interest=total_interest,
        total_loan_with_interest=total_with_interest,
        monthly_payment=total_with_interest / params.term_months,
    )
