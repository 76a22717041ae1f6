"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field


# ---- Request schemas ----

class ProjectionRequest(BaseModel):
    """Partial parameter set. Omitted fields take the configured defaults."""
    car_price: float | None = None
    down_payment_kind: str | None = Field(None, description="'percent' or 'fixed'")
    down_payment_value: float | None = None
    term_months: int | None = None
    annual_interest_rate_percent: float | None = None
    insurance_per_year: float | None = None
    act_fee_per_year: float | None = None
    road_tax_per_year: float | None = None
    maintenance_per_year: float | None = None
    fuel_per_month: float | None = None

    include_schedule: bool = True


# ---- Response schemas ----

class ParametersResponse(BaseModel):
    car_price: float
    down_payment_kind: str
    down_payment_value: float
    term_months: int
    annual_interest_rate_percent: float
    insurance_per_year: float
    act_fee_per_year: float
    road_tax_per_year: float
    maintenance_per_year: float
    fuel_per_month: float


class LoanTermOption(BaseModel):
    months: int
    years: float


class MonthlyRecordResponse(BaseModel):
    month: int
    year: int
    principal: float
    interest: float
    payment: float
    insurance: float
    act: float
    tax: float
    maintenance: float
    fuel: float
    total_monthly: float
    remaining_principal: float
    is_first_month_of_year: bool


class YearlySummaryResponse(BaseModel):
    year: int
    month_count: int
    total_monthly: float
    total_payment: float
    total_interest: float


class RecurringCostsResponse(BaseModel):
    monthly_insurance: float
    monthly_act: float
    monthly_tax: float
    monthly_maintenance: float
    monthly_fuel: float
    total_monthly_expense: float
    yearly_insurance: float
    yearly_act: float
    yearly_tax: float
    yearly_maintenance: float
    yearly_fuel: float


class ProjectionResponse(BaseModel):
    parameters: ParametersResponse
    down_payment: float
    loan_amount: float
    total_interest: float
    total_loan_with_interest: float
    monthly_payment: float
    costs: RecurringCostsResponse
    total_paid: float
    total_all_expenses: float
    cost_over_price: float
    yearly_summaries: list[YearlySummaryResponse]
    schedule: list[MonthlyRecordResponse] = []


class ValidationErrorDetail(BaseModel):
    field: str
    reason: str
