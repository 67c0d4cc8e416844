"""
Command handlers for the ordered-form CLI
"""

from .order import OrderCommand, OrderResult, OrderStatus

__all__ = [
    "OrderCommand",
    "OrderResult",
    "OrderStatus",
]
