"""
Core modules for position-based ordering
"""

from .exceptions import (
    CircularChainError,
    InvalidDifferedTargetError,
    InvalidPositionShapeError,
    OrderedConfigurationError,
    SymmetricConflictError,
)
from .models import Item, Position, PositionKind, Side
from .orderer import Orderer, order_items
from .position import normalize_position

__all__ = [
    # Classes
    "Orderer",
    "Item",
    "Position",
    "PositionKind",
    "Side",
    # Functions
    "order_items",
    "normalize_position",
    # Exceptions
    "OrderedConfigurationError",
    "InvalidPositionShapeError",
    "InvalidDifferedTargetError",
    "CircularChainError",
    "SymmetricConflictError",
]
