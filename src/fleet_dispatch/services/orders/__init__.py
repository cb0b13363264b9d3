"""Order synthesis helpers."""

from .generator import format_order_id, generate_orders

__all__ = ["generate_orders", "format_order_id"]
