"""
Ordered Form - order sibling items from their declared positions
"""

from .core import (
    CircularChainError,
    InvalidDifferedTargetError,
    InvalidPositionShapeError,
    Item,
    OrderedConfigurationError,
    Orderer,
    Position,
    PositionKind,
    Side,
    SymmetricConflictError,
    normalize_position,
    order_items,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Orderer",
    "Item",
    "Position",
    "PositionKind",
    "Side",
    "order_items",
    "normalize_position",
    "OrderedConfigurationError",
    "InvalidPositionShapeError",
    "InvalidDifferedTargetError",
    "CircularChainError",
    "SymmetricConflictError",
]
