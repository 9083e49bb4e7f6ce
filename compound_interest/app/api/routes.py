"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_interest.core.compound import compound
from compound_interest.core.errors import CalculationError
from compound_interest.core.frequency import CompoundingFrequency, periods_per_year
from compound_interest.core.solver import solve
from compound_interest.schemas.calculation import (
    CalculationParams,
    FrequencyInfo,
    solve_request_adapter,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    """Report solver rejections with their taxonomy kind."""
    logger.info("calculation rejected (%s): %s", exc.kind, exc)
    body = {"error": exc.kind, "field": exc.field, "detail": str(exc)}
    return jsonify(body), HTTPStatus.BAD_REQUEST


@api_bp.get("/frequencies")
def frequencies() -> Any:
    """List the supported compounding frequencies with their display labels."""
    labels: Dict[str, str] = current_app.config["SETTINGS"].FREQUENCY_LABELS
    items = [
        FrequencyInfo(
            value=member,
            label=labels.get(member.value, member.value),
            periodsPerYear=None if member.is_continuous else periods_per_year(member),
        )
        for member in CompoundingFrequency
    ]
    return jsonify([item.model_dump(mode="json") for item in items])


@api_bp.post("/calc/compound")
def calc_compound() -> Any:
    """Forward calculation for the "new calculation" form."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = CalculationParams.model_validate(raw_payload)
    result = compound(
        params.principal,
        params.rate,
        params.time,
        params.frequency,
        start_date=params.startDate,
    )
    response = result.model_dump(mode="json")
    response["record"] = result.to_record(params).model_dump(mode="json")
    return jsonify(response)


@api_bp.post("/calc/solve")
def calc_solve() -> Any:
    """Solve for whichever of principal, rate, time or finalAmount is withheld."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    solve_request = solve_request_adapter.validate_python(raw_payload)
    result = solve(solve_request)
    logger.info("solved %s=%s", result.solveFor, result.value)
    response = result.model_dump(mode="json")
    response["record"] = result.to_record().model_dump(mode="json")
    return jsonify(response)
