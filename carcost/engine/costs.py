"""Recurring ownership costs before any yearly insurance discount."""

from carcost.models.loan import LoanParameters
from carcost.models.results import RecurringCosts, ResolvedLoan


def recurring_costs(params: LoanParameters, loan: ResolvedLoan) -> RecurringCosts:
    monthly_insurance = params.insurance_per_year / 12
    monthly_act = params.act_fee_per_year / 12
    monthly_tax = params.road_tax_per_year / 12
    monthly_maintenance = params.maintenance_per_year / 12

    return RecurringCosts(
        monthly_insurance=monthly_insurance,
        monthly_act=monthly_act,
        monthly_tax=monthly_tax,
        monthly_maintenance=monthly_maintenance,
        monthly_fuel=params.fuel_per_month,
        total_monthly_expense=(
            loan.monthly_payment
            + monthly_insurance
            + monthly_act
            + monthly_tax
            + monthly_maintenance
            + params.fuel_per_month
        ),
        yearly_insurance=params.insurance_per_year,
        yearly_act=params.act_fee_per_year,
        yearly_tax=params.road_tax_per_year,
        yearly_maintenance=params.maintenance_per_year,
        yearly_fuel=params.fuel_per_month * 12,
    )
