"""Month-by-month ownership schedule.

Pure functions: dataclasses in, tuple of MonthlyRecord out. No I/O.
"""

import math

from carcost.models.loan import LoanParameters
from carcost.models.results import MonthlyRecord, ResolvedLoan

# Insurance renewals get 10% cheaper every year of ownership
INSURANCE_YEARLY_DISCOUNT = 0.9


def insurance_discount(year: int) -> float:
    """Multiplier applied to the annual premium in a given year (1-indexed)."""
    return INSURANCE_YEARLY_DISCOUNT ** (year - 1)


def generate_schedule(
    params: LoanParameters, loan: ResolvedLoan
) -> tuple[MonthlyRecord, ...]:
    """Generate one record per month of the term, in month order."""
    n = params.term_months
    principal = loan.loan_amount / n
    interest = loan.total_interest / n
    payment = loan.monthly_payment

    act = params.act_fee_per_year / 12
    tax = params.road_tax_per_year / 12
    maintenance = params.maintenance_per_year / 12
    fuel = params.fuel_per_month

    records: list[MonthlyRecord] = []
    balance = loan.loan_amount

    for month in range(1, n + 1):
        year = math.ceil(month / 12)
        insurance = params.insurance_per_year * insurance_discount(year) / 12

        balance -= principal
        if month == n:
            # Repeated subtraction leaves float residue on either side of zero
            balance = 0.0

        records.append(MonthlyRecord(
            month=month,
            year=year,
            principal=principal,
            interest=interest,
            payment=payment,
            insurance=insurance,
            act=act,
            tax=tax,
            maintenance=maintenance,
            fuel=fuel,
            total_monthly=payment + insurance + act + tax + maintenance + fuel,
            remaining_principal=max(0.0, balance),
            is_first_month_of_year=(month - 1) % 12 == 0,
        ))

    return tuple(records)
