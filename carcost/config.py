from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "CARCOST_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Default parameter set, used for any field a request leaves out.
    # The engine itself never applies defaults.
    default_car_price: float = 1_000_000
    default_down_payment_kind: str = "percent"
    default_down_payment_value: float = 20
    default_term_months: int = 60
    default_interest_rate_percent: float = 3.5
    default_insurance_per_year: float = 25_000
    default_act_fee_per_year: float = 650  # Compulsory motor insurance
    default_road_tax_per_year: float = 1_600
    default_maintenance_per_year: float = 6_000
    default_fuel_per_month: float = 3_000

    # Preset terms offered to users, in months
    loan_term_options: list[int] = [12, 24, 36, 48, 60, 72, 84]


settings = Settings()
