"""Projection routes: partial parameters in, full cost-of-ownership projection out."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from carcost.api.deps import get_settings
from carcost.api.schemas import (
    LoanTermOption,
    MonthlyRecordResponse,
    ParametersResponse,
    ProjectionRequest,
    ProjectionResponse,
    RecurringCostsResponse,
    YearlySummaryResponse,
)
from carcost.config import Settings
from carcost.engine.projection import compute
from carcost.engine.validation import ValidationError, validate
from carcost.models.loan import DownPaymentKind, LoanParameters
from carcost.models.results import LoanProjection

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/projection", tags=["projection"])


def _pick(value, default):
    # Zero is a legitimate value, so only None falls back
    return default if value is None else value


def _build_parameters(req: ProjectionRequest, cfg: Settings) -> LoanParameters:
    """Merge request overrides onto the configured default parameter set."""
    kind = _pick(req.down_payment_kind, cfg.default_down_payment_kind)
    try:
        down_payment_kind = DownPaymentKind(kind)
    except ValueError:
        raise ValidationError("down_payment_kind", "must be 'percent' or 'fixed'")

    return LoanParameters(
        car_price=_pick(req.car_price, cfg.default_car_price),
        down_payment_kind=down_payment_kind,
        down_payment_value=_pick(req.down_payment_value, cfg.default_down_payment_value),
        term_months=_pick(req.term_months, cfg.default_term_months),
        annual_interest_rate_percent=_pick(
            req.annual_interest_rate_percent, cfg.default_interest_rate_percent
        ),
        insurance_per_year=_pick(req.insurance_per_year, cfg.default_insurance_per_year),
        act_fee_per_year=_pick(req.act_fee_per_year, cfg.default_act_fee_per_year),
        road_tax_per_year=_pick(req.road_tax_per_year, cfg.default_road_tax_per_year),
        maintenance_per_year=_pick(req.maintenance_per_year, cfg.default_maintenance_per_year),
        fuel_per_month=_pick(req.fuel_per_month, cfg.default_fuel_per_month),
    )


def _parameters_to_response(params: LoanParameters) -> ParametersResponse:
    return ParametersResponse(
        car_price=params.car_price,
        down_payment_kind=params.down_payment_kind.value,
        down_payment_value=params.down_payment_value,
        term_months=params.term_months,
        annual_interest_rate_percent=params.annual_interest_rate_percent,
        insurance_per_year=params.insurance_per_year,
        act_fee_per_year=params.act_fee_per_year,
        road_tax_per_year=params.road_tax_per_year,
        maintenance_per_year=params.maintenance_per_year,
        fuel_per_month=params.fuel_per_month,
    )


def _projection_to_response(
    projection: LoanProjection, include_schedule: bool = True
) -> ProjectionResponse:
    """Convert engine LoanProjection to API response."""
    schedule = []
    if include_schedule:
        schedule = [
            MonthlyRecordResponse.model_validate(r, from_attributes=True)
            for r in projection.schedule
        ]

    return ProjectionResponse(
        parameters=_parameters_to_response(projection.parameters),
        down_payment=projection.down_payment,
        loan_amount=projection.loan_amount,
        total_interest=projection.total_interest,
        total_loan_with_interest=projection.total_loan_with_interest,
        monthly_payment=projection.monthly_payment,
        costs=RecurringCostsResponse.model_validate(projection.costs, from_attributes=True),
        total_paid=projection.total_paid,
        total_all_expenses=projection.total_all_expenses,
        cost_over_price=projection.cost_over_price,
        yearly_summaries=[
            YearlySummaryResponse.model_validate(y, from_attributes=True)
            for y in projection.yearly_summaries
        ],
        schedule=schedule,
    )


@router.post("", response_model=ProjectionResponse)
async def project(req: ProjectionRequest, cfg: Settings = Depends(get_settings)):
    """Primary endpoint: partial parameters -> full projection."""
    try:
        params = _build_parameters(req, cfg)
        projection = compute(params)
    except ValidationError as e:
        logger.warning("Rejected parameter set: %s", e)
        raise HTTPException(status_code=400, detail={"field": e.field, "reason": e.reason})

    return _projection_to_response(projection, include_schedule=req.include_schedule)


@router.get("/defaults", response_model=ParametersResponse)
async def defaults(cfg: Settings = Depends(get_settings)):
    """The parameter set used for any field a request omits."""
    try:
        params = validate(_build_parameters(ProjectionRequest(), cfg))
    except ValidationError as e:
        raise HTTPException(status_code=500, detail=f"Misconfigured defaults: {e}")
    return _parameters_to_response(params)


@router.get("/loan-terms", response_model=list[LoanTermOption])
async def loan_terms(cfg: Settings = Depends(get_settings)):
    return [LoanTermOption(months=m, years=m / 12) for m in cfg.loan_term_options]
