"""Application configuration and settings management."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FLEET_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Fleet Dispatch Simulator API"
    api_prefix: str = "/api"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Cost model (Yuan, Yuan/km, kg/km)
    owned_fixed_cost: float = Field(default=300.0, ge=0.0)
    owned_per_km_cost: float = Field(default=13.5, ge=0.0)
    third_party_fixed_cost: float = Field(default=2000.0, ge=0.0)
    third_party_per_km_cost: float = Field(default=14.0, ge=0.0)
    co2_per_km: float = Field(default=0.27, ge=0.0, description="Emissions factor in kg CO2 per km.")
    manual_inflation_factor: float = Field(
        default=1.153,
        ge=1.0,
        description=(
            "Assumed cost multiplier of unassisted manual dispatch. Approximately inverts a "
            "reported 13.28% reduction; not a measured quantity."
        ),
    )

    # Abstract plane used to place synthetic orders
    plane_width: float = Field(default=800.0, gt=0.0)
    plane_height: float = Field(default=500.0, gt=0.0)
    port_x_ratio: float = Field(default=0.8, ge=0.0, le=1.0)
    port_y_ratio: float = Field(default=0.5, ge=0.0, le=1.0)
    hinterland_x_min: float = Field(default=20.0, ge=0.0)
    hinterland_width_ratio: float = Field(default=0.7, gt=0.0, le=1.0)
    hinterland_y_margin: float = Field(default=20.0, ge=0.0)
    distance_scale: float = Field(default=0.5, ge=0.0, description="Km per plane unit.")
    distance_offset_km: int = Field(default=50, ge=0, description="Minimum haul distance added to every order.")

    # Order mix
    door_to_door_share: float = Field(default=0.6, ge=0.0, le=1.0)
    forty_foot_share: float = Field(default=0.5, ge=0.0, le=1.0)
    urgent_share: float = Field(default=0.2, ge=0.0, le=1.0)

    # Reference bounds for client controls; the engine itself does not enforce them.
    default_order_count: int = Field(default=84, ge=0)
    default_fleet_size: int = Field(default=30, ge=0)
    order_count_bounds: tuple[int, int] = (10, 150)
    fleet_size_bounds: tuple[int, int] = (5, 50)

    # Hard per-request limits enforced by the HTTP layer
    max_order_count: int = Field(default=10_000, ge=0)
    max_fleet_size: int = Field(default=10_000, ge=0)

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("order_count_bounds", "fleet_size_bounds", mode="after")
    @classmethod
    def _check_bounds(cls, value: tuple[int, int]) -> tuple[int, int]:
        low, high = value
        if low < 0 or high < low:
            raise ValueError("bounds must satisfy 0 <= low <= high")
        return value


@dataclass(frozen=True, slots=True)
class CostModel:
    """Per-order tariffs and reporting factors used by allocation and aggregation."""

    owned_fixed_cost: float = 300.0
    owned_per_km_cost: float = 13.5
    third_party_fixed_cost: float = 2000.0
    third_party_per_km_cost: float = 14.0
    co2_per_km: float = 0.27
    manual_inflation_factor: float = 1.153

    def __post_init__(self) -> None:
        for name in (
            "owned_fixed_cost",
            "owned_per_km_cost",
            "third_party_fixed_cost",
            "third_party_per_km_cost",
            "co2_per_km",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.manual_inflation_factor < 1:
            raise ValueError("manual_inflation_factor must be >= 1")

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "CostModel":
        source = source or settings
        return cls(
            owned_fixed_cost=source.owned_fixed_cost,
            owned_per_km_cost=source.owned_per_km_cost,
            third_party_fixed_cost=source.third_party_fixed_cost,
            third_party_per_km_cost=source.third_party_per_km_cost,
            co2_per_km=source.co2_per_km,
            manual_inflation_factor=source.manual_inflation_factor,
        )

    def owned_cost(self, distance_km: float) -> float:
        return self.owned_fixed_cost + distance_km * self.owned_per_km_cost

    def third_party_cost(self, distance_km: float) -> float:
        return self.third_party_fixed_cost + distance_km * self.third_party_per_km_cost

    def outsourcing_premium(self, distance_km: float) -> float:
        return self.third_party_cost(distance_km) - self.owned_cost(distance_km)


@dataclass(frozen=True, slots=True)
class GeneratorParams:
    """Geometry and order-mix parameters for synthetic order batches."""

    plane_width: float = 800.0
    plane_height: float = 500.0
    port_x_ratio: float = 0.8
    port_y_ratio: float = 0.5
    hinterland_x_min: float = 20.0
    hinterland_width_ratio: float = 0.7
    hinterland_y_margin: float = 20.0
    distance_scale: float = 0.5
    distance_offset_km: int = 50
    door_to_door_share: float = 0.6
    forty_foot_share: float = 0.5
    urgent_share: float = 0.2

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "GeneratorParams":
        source = source or settings
        return cls(
            plane_width=source.plane_width,
            plane_height=source.plane_height,
            port_x_ratio=source.port_x_ratio,
            port_y_ratio=source.port_y_ratio,
            hinterland_x_min=source.hinterland_x_min,
            hinterland_width_ratio=source.hinterland_width_ratio,
            hinterland_y_margin=source.hinterland_y_margin,
            distance_scale=source.distance_scale,
            distance_offset_km=source.distance_offset_km,
            door_to_door_share=source.door_to_door_share,
            forty_foot_share=source.forty_foot_share,
            urgent_share=source.urgent_share,
        )

    @property
    def port(self) -> tuple[float, float]:
        return (self.plane_width * self.port_x_ratio, self.plane_height * self.port_y_ratio)

    @property
    def hinterland_bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the region orders are drawn from."""
        max_y = max(self.hinterland_y_margin, self.plane_height - self.hinterland_y_margin)
        return (
            self.hinterland_x_min,
            self.hinterland_y_margin,
            self.hinterland_x_min + self.plane_width * self.hinterland_width_ratio,
            max_y,
        )


settings = Settings()
