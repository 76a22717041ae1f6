from dataclasses import dataclass

from carcost.models.loan import LoanParameters


@dataclass(frozen=True)
class ResolvedLoan:
    down_payment: float
    loan_amount: float
    total_interest: float
    total_loan_with_interest: float
    monthly_payment: float


@dataclass(frozen=True)
class MonthlyRecord:
    month: int  # 1-based
    year: int
    principal: float
    interest: float
    payment: float

    # Ownership costs
    insurance: float  # Discounted for the record's year
    act: float
    tax: float
    maintenance: float
    fuel: float

    total_monthly: float
    remaining_principal: float
    is_first_month_of_year: bool

    @property
    def running_costs(self) -> float:
        """Everything except the loan payment and insurance."""
        return self.act + self.tax + self.maintenance + self.fuel


@dataclass(frozen=True)
class YearlySummary:
    year: int
    month_count: int
    total_monthly: float
    total_payment: float
    total_interest: float


@dataclass(frozen=True)
class RecurringCosts:
    """Undiscounted first-year ownership costs, monthly and yearly."""
    monthly_insurance: float
    monthly_act: float
    monthly_tax: float
    monthly_maintenance: float
    monthly_fuel: float
    total_monthly_expense: float  # Loan payment + all monthly costs

    yearly_insurance: float
    yearly_act: float
    yearly_tax: float
    yearly_maintenance: float
    yearly_fuel: float


@dataclass(frozen=True)
class LoanProjection:
    parameters: LoanParameters

    # Loan
    down_payment: float
    loan_amount: float
    total_interest: float
    total_loan_with_interest: float
    monthly_payment: float

    costs: RecurringCosts
    schedule: tuple[MonthlyRecord, ...]
    yearly_summaries: tuple[YearlySummary, ...]

    # Whole-of-term totals, down payment included
    total_paid: float
    total_all_expenses: float

    @property
    def cost_over_price(self) -> float:
        """Total cost of ownership beyond the sticker price."""
        return self.total_all_expenses - self.parameters.car_price

    def months_of_year(self, year: int) -> tuple[MonthlyRecord, ...]:
        return tuple(r for r in self.schedule if r.year == year)
