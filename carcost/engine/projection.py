"""Projection orchestrator: validate -> resolve -> schedule -> aggregate.

Pure computation. No I/O, no caching. Equal parameter sets always produce
equal projections, so callers may memoize on LoanParameters freely.
"""

import logging

from carcost.models.loan import LoanParameters
from carcost.models.results import LoanProjection

from carcost.engine.validation import validate
from carcost.engine.loan import resolve_loan
from carcost.engine.schedule import generate_schedule
from carcost.engine.aggregate import aggregate_schedule
from carcost.engine.costs import recurring_costs

logger = logging.getLogger(__name__)


def compute(params: LoanParameters) -> LoanProjection:
    """Run the full projection.

    Raises ValidationError before any computation if params are invalid.
    """
    params = validate(params)

    loan = resolve_loan(params)
    schedule = generate_schedule(params, loan)
    yearly, total_paid, total_all_expenses = aggregate_schedule(
        schedule, loan.down_payment, loan.total_loan_with_interest
    )

    logger.debug(
        "Projected %d months: loan=%.2f interest=%.2f monthly=%.2f",
        params.term_months, loan.loan_amount, loan.total_interest, loan.monthly_payment,
    )

    return LoanProjection(
        parameters=params,
        down_payment=loan.down_payment,
        loan_amount=loan.loan_amount,
        total_interest=loan.total_interest,
        total_loan_with_interest=loan.total_loan_with_interest,
        monthly_payment=loan.monthly_payment,
        costs=recurring_costs(params, loan),
        schedule=schedule,
        yearly_summaries=yearly,
        total_paid=total_paid,
        total_all_expenses=total_all_expenses,
    )
