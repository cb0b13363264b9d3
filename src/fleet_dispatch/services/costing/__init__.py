"""Cost and impact reporting."""

from .aggregator import aggregate, fleet_utilization_pct, savings_pct

__all__ = ["aggregate", "fleet_utilization_pct", "savings_pct"]
