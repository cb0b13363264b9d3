"""Simulation endpoints."""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, HTTPException, Response, status

from ...schemas.simulation import SimulationRequest, SimulationResponse
from ...services.outputs.formatter import schedule_to_csv, simulation_run_to_response
from ...services.simulation.service import run_simulation
from ...models.domain import SimulationRun

router = APIRouter(prefix="/simulations", tags=["simulations"])


def _execute(payload: SimulationRequest) -> SimulationRun:
    rng = random.Random(payload.seed) if payload.seed is not None else None
    try:
        return run_simulation(
            payload.order_count,
            payload.fleet_size,
            rng=rng,
            strategy=payload.strategy,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error running simulation: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to run simulation: {str(exc)}"
        ) from exc


@router.post("/run", response_model=SimulationResponse, status_code=status.HTTP_200_OK)
def run(payload: SimulationRequest) -> SimulationResponse:
    simulation = _execute(payload)
    metadata = {"order_count": payload.order_count, "seed": payload.seed}
    return simulation_run_to_response(simulation, metadata=metadata)


@router.post("/schedule.csv", status_code=status.HTTP_200_OK)
def schedule_csv(payload: SimulationRequest) -> Response:
    """Run a simulation and return only its schedule log as CSV."""
    simulation = _execute(payload)
    return Response(
        content=schedule_to_csv(simulation.schedule),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="schedule.csv"'},
    )
