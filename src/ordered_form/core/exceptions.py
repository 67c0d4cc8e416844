"""
Ordering Exceptions
===================

Errors raised when the declared positions of a set of items cannot be
turned into an order. Every error carries the offending names as attributes
and a readable message for whoever wrote the positions.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .models import Side


def _decorate(value: Any, decorator: str = '"') -> str:
    return f"{decorator}{value}{decorator}"


def _decorate_all(values: Iterable[Any], decorator: str = '"') -> list[str]:
    return [_decorate(value, decorator) for value in values]


class OrderedConfigurationError(Exception):
    """Base exception for invalid ordering configuration"""

    pass


class InvalidPositionShapeError(OrderedConfigurationError):
    """Position is not one of none, first, last, before or after"""

    def __init__(self, name: str, shape: Any, reason: str | None = None):
        self.name = name
        self.shape = shape
        super().__init__(self._build_message(name, shape, reason))

    @staticmethod
    def _build_message(name: str, shape: Any, reason: str | None) -> str:
        if isinstance(shape, str):
            return (
                f"The {_decorate(name)} form uses position as string which can "
                f'only be "first" or "last" (current: {_decorate(shape)}).'
            )

        if isinstance(shape, Mapping):
            if reason:
                return (
                    f"The {_decorate(name)} form uses an invalid before/after "
                    f"position: {reason}."
                )
            keys = ", ".join(_decorate_all(shape.keys()))
            return (
                f"The {_decorate(name)} form uses position as array or you must "
                f'define the "before" or "after" option (current: {keys}).'
            )

        return (
            f"The {_decorate(name)} form uses an unsupported position "
            f"(current: {shape!r})."
        )


class InvalidDifferedTargetError(OrderedConfigurationError):
    """Before/after position references a sibling that does not exist"""

    def __init__(self, name: str, side: Side, target: str):
        self.name = name
        self.side = side
        self.target = target
        decorated_target = _decorate(target)
        super().__init__(
            f"The {_decorate(name)} form is configured to be placed just "
            f"{side.value} the form {decorated_target} but the form "
            f"{decorated_target} does not exist."
        )


class CircularChainError(OrderedConfigurationError):
    """Chain of before/after positions loops back to its origin

    ``side`` is None when the loop alternates between before and after
    positions.
    """

    def __init__(self, chain: list[str], side: Side | None):
        self.chain = list(chain)
        self.side = side
        positions = side.value if side is not None else "before/after"
        super().__init__(
            f"The form ordering cannot be resolved due to conflict in "
            f"{positions} positions ({' => '.join(_decorate_all(self.chain))})."
        )


class SymmetricConflictError(OrderedConfigurationError):
    """Two items wait on each other through opposite before/after positions"""

    def __init__(self, name: str, symmetric: str):
        self.name = name
        self.symmetric = symmetric
        super().__init__(
            f"The form ordering does not support symmetrical before/after "
            f"option ({_decorate(name)} <=> {_decorate(symmetric)})."
        )
