"""HTTP routes for the Flask API."""

import math
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from savings_gap import __version__
from savings_gap.config import Settings
from savings_gap.core.plan import PlanResult, calculate_plan
from savings_gap.report.formatting import format_eur
from savings_gap.report.pdf import render_plan_pdf
from savings_gap.schemas.ping import PingResponse
from savings_gap.schemas.plan import PlanDisplay, PlanRequest, PlanResponse
from savings_gap.utils.logging import get_logger

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    logger.info("rejected plan input errors=%s", len(detail))
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    """Malformed or missing JSON bodies."""
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def _read_plan_request() -> PlanRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("Request body must be a JSON object.")
    return PlanRequest.model_validate(raw_payload)


def build_plan_response(result: PlanResult) -> PlanResponse:
    return PlanResponse(
        retirementPeriods=result.retirement_periods,
        retirementMonthlyRate=result.retirement_rate,
        withdrawalMonthlyGrowth=result.withdrawal_growth,
        usedLevelAnnuity=result.used_level_annuity,
        requiredCapital=_finite_or_none(result.required_capital),
        accumulationPeriods=result.accumulation_periods,
        accumulationMonthlyRate=result.accumulation_rate,
        contributionMonthlyGrowth=result.contribution_growth,
        futureFromExistingCapital=_finite_or_none(result.future_from_existing_capital),
        residualTarget=_finite_or_none(result.residual_target),
        firstMonthContribution=_finite_or_none(result.first_month_contribution),
        contributionInFiveYears=_finite_or_none(result.contribution_in_five_years),
        display=PlanDisplay(
            requiredCapital=format_eur(result.required_capital),
            firstMonthContribution=format_eur(result.first_month_contribution),
            contributionInFiveYears=format_eur(result.contribution_in_five_years),
        ),
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/plan/defaults")
def plan_defaults() -> Any:
    """Form defaults the frontend starts from."""
    return jsonify(PlanRequest().model_dump())


@api_bp.post("/calc/plan")
def plan() -> Any:
    """Required capital and required monthly contribution for one input set."""
    payload = _read_plan_request()
    result = calculate_plan(payload)
    return jsonify(build_plan_response(result).model_dump())


@api_bp.post("/report/pdf")
def plan_report() -> Any:
    """Same calculation as /calc/plan, rendered as a downloadable PDF."""
    payload = _read_plan_request()
    result = calculate_plan(payload)
    settings = _settings()
    pdf = render_plan_pdf(payload, result, title=settings.report_title)

    response = current_app.response_class(pdf, mimetype="application/pdf")
    response.headers["Content-Disposition"] = f'attachment; filename="{settings.report_filename}"'
    return response
