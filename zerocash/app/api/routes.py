"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from zerocash import __version__
from zerocash.config import DEFAULT_PARAMETERS
from zerocash.core.depletion import solve
from zerocash.core.parameters import (
    FinancialParameters,
    ParameterValidationError,
    review_parameters,
)
from zerocash.core.trajectory import display_horizon, project
from zerocash.schemas.ping import PingResponse
from zerocash.schemas.zcd import (
    ParametersRequest,
    PlanResponse,
    ProjectionRequest,
    ProjectionResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ParameterValidationError)
def _handle_parameter_error(exc: ParameterValidationError):
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _json_response(model: BaseModel, status: HTTPStatus = HTTPStatus.OK):
    # model_dump_json writes inf/nan as null, which jsonify cannot do
    return current_app.response_class(
        model.model_dump_json(by_alias=True),
        status=status,
        mimetype="application/json",
    )


def _checked_parameters(payload: ParametersRequest) -> tuple[FinancialParameters, list[str]]:
    params = payload.to_parameters()
    review = review_parameters(params)
    if review.errors:
        logger.info("rejected parameters: %s", "; ".join(review.errors))
        raise ParameterValidationError(review.errors)
    for warning in review.warnings:
        logger.warning("parameter warning: %s", warning)
    return params, review.warnings


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Initial form values, in the same shape the calc endpoints accept."""
    payload = ParametersRequest.model_validate(DEFAULT_PARAMETERS)
    return jsonify(payload.model_dump(by_alias=True))


@api_bp.post("/calc/zcd")
def zero_cash_date() -> Any:
    """Solve for the zero cash date and the sustainability metrics."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ParametersRequest.model_validate(raw_payload)
    params, _ = _checked_parameters(payload)

    result = solve(params)
    logger.info("zcd: infinite=%s years=%s", result.is_infinite, result.years_to_zero)
    return _json_response(result)


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Year-by-year capital and withdrawal table for a caller-chosen horizon."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    params, _ = _checked_parameters(payload.parameters)

    horizon = min(payload.horizon_years, current_app.config["MAX_HORIZON_YEARS"])
    rows = project(params, horizon)
    return _json_response(ProjectionResponse(projection=rows))


@api_bp.post("/calc/plan")
def plan() -> Any:
    """Solve, pick a display horizon from the result, and project up to it."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ParametersRequest.model_validate(raw_payload)
    params, warnings = _checked_parameters(payload)

    result = solve(params)
    horizon = display_horizon(
        result.years_to_zero,
        max_horizon=current_app.config["MAX_HORIZON_YEARS"],
    )
    rows = project(params, horizon)

    response = PlanResponse(
        result=result,
        horizon_years=horizon,
        projection=rows,
        warnings=warnings,
    )
    return _json_response(response)
