"""
Position normalization

Turns the raw position declared on an item (None, "first", "last" or a
before/after mapping) into a Position.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidPositionShapeError
from .models import Position, PositionKind, Side

logger = logging.getLogger(__name__)

STRING_POSITIONS = {
    "first": Position.first(),
    "last": Position.last(),
}

RELATIVE_KEYS = tuple(side.value for side in Side)


def normalize_position(name: str, raw: Any) -> Position:
    """
    Normalize a raw position declared on an item

    Args:
        name: Name of the item declaring the position
        raw: None, "", "first", "last", a mapping with "before" and/or
            "after" keys, or an already built Position

    Returns:
        Position instance

    Raises:
        InvalidPositionShapeError: If the shape is not recognized
    """
    if isinstance(raw, Position):
        _check_position(name, raw)
        return raw

    if raw is None or raw == "":
        return Position.none()

    if isinstance(raw, str):
        if raw not in STRING_POSITIONS:
            raise InvalidPositionShapeError(name, raw)
        return STRING_POSITIONS[raw]

    if isinstance(raw, Mapping):
        if not raw:
            return Position.none()
        return _normalize_mapping(name, raw)

    raise InvalidPositionShapeError(name, raw)


def _normalize_mapping(name: str, raw: Mapping) -> Position:
    unknown = [key for key in raw if key not in RELATIVE_KEYS]
    if unknown or not any(key in raw for key in RELATIVE_KEYS):
        raise InvalidPositionShapeError(name, raw)

    targets = {}
    for key in RELATIVE_KEYS:
        if key not in raw:
            continue
        target = raw[key]
        if not isinstance(target, str) or not target:
            raise InvalidPositionShapeError(
                name, raw, f'"{key}" must name a sibling (current: {target!r})'
            )
        targets[key] = target

    position = Position(PositionKind.RELATIVE, **targets)
    logger.debug(f"Normalized position of {name!r}: {position}")
    return position


def _check_position(name: str, position: Position) -> None:
    """Reject Position instances built with an inconsistent shape"""
    if not isinstance(position.kind, PositionKind):
        raise InvalidPositionShapeError(name, position)

    has_target = position.before is not None or position.after is not None
    if position.kind is PositionKind.RELATIVE:
        if not has_target:
            raise InvalidPositionShapeError(name, position)
        for target in (position.before, position.after):
            if target is not None and (not isinstance(target, str) or not target):
                raise InvalidPositionShapeError(name, position)
    elif has_target:
        raise InvalidPositionShapeError(name, position)
