"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from phasein.core.simulation import make_rng, run
from phasein.models import Frequency, InvalidInputError, parse_inputs
from phasein.schemas.ping import PingResponse
from phasein.schemas.simulation import SimulationRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    """Convert rejected simulation inputs into JSON responses."""
    logger.info("rejected simulation inputs: %s", exc)
    return (
        jsonify({"error": str(exc), "fields": exc.fields, "detail": exc.errors}),
        HTTPStatus.BAD_REQUEST,
    )


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"error": "request body must be valid JSON"}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    config = current_app.config["SIMULATION"]
    response = PingResponse(message="pong", horizonDays=config.days)
    return jsonify(response.model_dump())


@api_bp.get("/frequencies")
def frequencies() -> Any:
    """Contribution frequencies the periodic strategy understands."""
    return jsonify(
        [
            {"value": frequency.value, "intervalsPerYear": frequency.intervals_per_year}
            for frequency in Frequency
        ]
    )


@api_bp.post("/simulate")
def simulate() -> Any:
    """Simulate one market year and compare lump sum with phased investing."""
    raw_payload = request.get_json(force=True, silent=False)
    payload = parse_inputs(raw_payload, model=SimulationRequest)

    config = current_app.config["SIMULATION"]
    seed = payload.seed if payload.seed is not None else config.random_seed
    inputs = payload.model_dump(exclude={"seed"})
    result = run(inputs, rng=make_rng(seed), config=config)
    return jsonify(result.model_dump())
