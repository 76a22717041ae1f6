from dataclasses import dataclass
from enum import Enum


class DownPaymentKind(Enum):
    PERCENT = "percent"
    FIXED = "fixed"


@dataclass(frozen=True)
class LoanParameters:
    # Purchase
    car_price: float
    down_payment_kind: DownPaymentKind
    down_payment_value: float  # % of price when PERCENT, currency amount when FIXED

    # Financing
    term_months: int
    annual_interest_rate_percent: float  # Flat rate, e.g. 3.5 for 3.5%

    # Ownership costs
    insurance_per_year: float = 0.0
    act_fee_per_year: float = 0.0  # Compulsory third-party insurance
    road_tax_per_year: float = 0.0
    maintenance_per_year: float = 0.0
    fuel_per_month: float = 0.0
