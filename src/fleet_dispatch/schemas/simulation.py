"""Pydantic request/response models for simulation endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..config import settings
from ..services.dispatch.dispatcher import StrategyName


class SimulationRequest(BaseModel):
    order_count: int = Field(
        ...,
        ge=0,
        le=settings.max_order_count,
        description="Number of synthetic orders for the day.",
    )
    fleet_size: int = Field(
        ...,
        ge=0,
        le=settings.max_fleet_size,
        description="Owned trucks available for the day.",
    )
    strategy: StrategyName = Field(default="greedy", description="Allocation strategy.")
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible order batch.")


class OrderModel(BaseModel):
    order_id: str
    kind: str
    container_size: str
    urgency: str
    x: float
    y: float
    distance_km: int
    status: str


class DispatchRecordModel(BaseModel):
    order_id: str
    vehicle_label: str
    method: str
    distance_km: int
    cost: float


class SimulationResultModel(BaseModel):
    total_cost: float
    owned_count: int
    outsourced_count: int
    total_km: int
    manual_cost_estimate: float
    savings: float
    savings_pct: float
    co2_kg: float
    fleet_size: int
    fleet_utilization_pct: float


class SimulationResponse(BaseModel):
    strategy: str
    result: SimulationResultModel
    orders: List[OrderModel]
    schedule: List[DispatchRecordModel]
    metadata: dict
