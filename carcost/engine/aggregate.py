"""Yearly and whole-of-term rollups of a monthly schedule."""

from carcost.models.results import MonthlyRecord, YearlySummary


def yearly_summaries(schedule: tuple[MonthlyRecord, ...]) -> tuple[YearlySummary, ...]:
    """Sum records per calendar year of the term.

    Years are contiguous in schedule order, so a single pass suffices.
    The last year holds fewer than 12 months when the term is not a
    whole number of years.
    """
    yearly: list[YearlySummary] = []
    year_months = 0
    year_monthly = 0.0
    year_payment = 0.0
    year_interest = 0.0

    for i, r in enumerate(schedule):
        year_months += 1
        year_monthly += r.total_monthly
        year_payment += r.payment
        year_interest += r.interest

        is_last = i == len(schedule) - 1
        if is_last or schedule[i + 1].year != r.year:
            yearly.append(YearlySummary(
                year=r.year,
                month_count=year_months,
                total_monthly=year_monthly,
                total_payment=year_payment,
                total_interest=year_interest,
            ))
            year_months = 0
            year_monthly = 0.0
            year_payment = 0.0
            year_interest = 0.0

    return tuple(yearly)


def aggregate_schedule(
    schedule: tuple[MonthlyRecord, ...],
    down_payment: float,
    total_loan_with_interest: float,
) -> tuple[tuple[YearlySummary, ...], float, float]:
    """Return (yearly_summaries, total_paid, total_all_expenses)."""
    total_paid = total_loan_with_interest + down_payment
    total_all_expenses = sum(r.total_monthly for r in schedule) + down_payment
    return yearly_summaries(schedule), total_paid, total_all_expenses
