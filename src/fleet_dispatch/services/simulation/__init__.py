"""Simulation facade exports."""

from .service import run_simulation, simulate_orders

__all__ = ["run_simulation", "simulate_orders"]
