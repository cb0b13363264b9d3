"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import CostModel, GeneratorParams, settings
from ...services.dispatch.dispatcher import STRATEGIES

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the active cost model, generator parameters and client bounds."""
    costs = CostModel.from_settings(settings)
    params = GeneratorParams.from_settings(settings)
    return {
        "costs": {
            "owned_fixed_cost": costs.owned_fixed_cost,
            "owned_per_km_cost": costs.owned_per_km_cost,
            "third_party_fixed_cost": costs.third_party_fixed_cost,
            "third_party_per_km_cost": costs.third_party_per_km_cost,
            "co2_per_km": costs.co2_per_km,
            "manual_inflation_factor": costs.manual_inflation_factor,
        },
        "generator": {
            "port": list(params.port),
            "hinterland_bounds": list(params.hinterland_bounds),
            "distance_scale": params.distance_scale,
            "distance_offset_km": params.distance_offset_km,
            "door_to_door_share": params.door_to_door_share,
            "forty_foot_share": params.forty_foot_share,
            "urgent_share": params.urgent_share,
        },
        "bounds": {
            "order_count": list(settings.order_count_bounds),
            "fleet_size": list(settings.fleet_size_bounds),
            "default_order_count": settings.default_order_count,
            "default_fleet_size": settings.default_fleet_size,
            "max_order_count": settings.max_order_count,
            "max_fleet_size": settings.max_fleet_size,
        },
        "strategies": list(STRATEGIES),
    }
