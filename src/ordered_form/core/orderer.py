"""
Position-Based Orderer
======================

Computes the order of a set of sibling items from the position each one
declares: no preference, first, last, just before a sibling or just after a
sibling.

Every item receives an integer weight. Placing an item at weight ``w`` shifts
every weight ``>= w`` up by one, so weights stay unique and keep the relative
order of earlier placements. Items pointing at a sibling that has no weight
yet are deferred until that sibling is placed; deferring is rejected when the
waiting items would form a loop.
"""

import logging
from collections import deque
from collections.abc import Iterable
from typing import Any

from .exceptions import (
    CircularChainError,
    InvalidDifferedTargetError,
    SymmetricConflictError,
)
from .models import Position, PositionKind, Side
from .position import normalize_position

logger = logging.getLogger(__name__)


class Orderer:
    """
    Orders named items according to their declared positions.

    The orderer keeps no state between calls: each call to order() works on
    a fresh _OrderingState, so one instance may be shared freely.
    """

    def order(self, items: Iterable[Any]) -> list[str]:
        """
        Order items by their declared positions

        Args:
            items: Objects exposing ``name`` and ``position``. The position
                may be a Position or a raw shape (None, "first", "last",
                {"before": ..., "after": ...}).

        Returns:
            Item names in resolved order

        Raises:
            InvalidPositionShapeError: If a position has an unknown shape
            InvalidDifferedTargetError: If a before/after target is not a sibling
            CircularChainError: If deferred positions loop back on themselves
            SymmetricConflictError: If two items wait on each other
        """
        items = list(items)
        names = [item.name for item in items]
        if len(set(names)) != len(names):
            duplicates = sorted({name for name in names if names.count(name) > 1})
            raise ValueError(f"Item names must be unique, got duplicates: {duplicates}")

        state = _OrderingState(names)
        for item in items:
            position = normalize_position(item.name, item.position)
            state.process(item.name, position)

        state.check_resolved()
        return state.ordered_names()


def order_items(items: Iterable[Any]) -> list[str]:
    """Order items with a fresh Orderer"""
    return Orderer().order(items)


class _OrderingState:
    """Bookkeeping for a single order() call"""

    def __init__(self, siblings: list[str]):
        self.names = list(siblings)
        self.siblings = set(siblings)
        self.weights: dict[str, int] = {}

        # target name -> names waiting on it, in registration order
        self.deferred: dict[Side, dict[str, list[str]]] = {side: {} for side in Side}
        # waiting name -> target name; each item waits on at most one target per side
        self.edges: dict[Side, dict[str, str]] = {side: {} for side in Side}
        # items declaring both a before and an after target
        self.dual_targets: set[str] = set()

        self.current_weight = 0
        self.last_weight = -1
        self.last_first: str | None = None
        # item name -> target it was last placed just after
        self.placed_after: dict[str, str] = {}

    def process(self, name: str, position: Position) -> None:
        kind = position.kind

        if kind is PositionKind.NONE:
            self.place(name, self.current_weight)
        elif kind is PositionKind.FIRST:
            self.place(name, self.first_weight)
            self.last_first = name
        elif kind is PositionKind.LAST:
            self.place(name, self.last_weight + 1)
        else:
            if position.before is not None and position.after is not None:
                self.dual_targets.add(name)
            for side in Side:
                target = position.target(side)
                if target is not None:
                    self.process_relative(name, side, target)

    @property
    def first_weight(self) -> int:
        if self.last_first is None:
            return 0
        return self.weights[self.last_first] + 1

    def process_relative(self, name: str, side: Side, target: str) -> None:
        if target in self.weights:
            self.place(name, self.relative_weight(side, target), side, target)
        else:
            self.defer(name, side, target)

    def relative_weight(self, side: Side, target: str) -> int:
        """Weight putting an item just before/after target

        After-items go behind the run of items already sitting right after
        target, so repeated "after target" items keep registration order.
        """
        if side is Side.BEFORE:
            return self.weights[target]

        by_weight = {weight: name for name, weight in self.weights.items()}
        weight = self.weights[target] + 1
        while self.placed_after.get(by_weight.get(weight)) == target:
            weight += 1
        return weight

    def assign(
        self, name: str, weight: int, side: Side | None = None, target: str | None = None
    ) -> None:
        for other, other_weight in self.weights.items():
            if other_weight >= weight:
                self.weights[other] = other_weight + 1

        if self.current_weight >= weight:
            self.current_weight += 1

        self.last_weight += 1
        self.weights[name] = weight
        if side is Side.AFTER:
            self.placed_after[name] = target
        else:
            self.placed_after.pop(name, None)
        logger.debug(f"Placed {name!r} at weight {weight}")

    def place(
        self, name: str, weight: int, side: Side | None = None, target: str | None = None
    ) -> None:
        """Assign a weight, then resolve every item waiting on it"""
        self.assign(name, weight, side, target)

        placed = deque([name])
        while placed:
            current = placed.popleft()
            for waiting_side in Side:
                for waiting in self.deferred[waiting_side].pop(current, []):
                    del self.edges[waiting_side][waiting]
                    weight = self.relative_weight(waiting_side, current)
                    self.assign(waiting, weight, waiting_side, current)
                    placed.append(waiting)

    def defer(self, name: str, side: Side, target: str) -> None:
        if target not in self.siblings:
            raise InvalidDifferedTargetError(name, side, target)

        self.deferred[side].setdefault(target, []).append(name)
        self.edges[side][name] = target
        logger.debug(f"Deferred {name!r} until {target!r} is placed ({side.value})")

        self.detect_circular(name, side)
        self.detect_symmetric(name, target, side)
        self.detect_mixed_circular(name)

    def detect_circular(self, name: str, side: Side) -> None:
        """Follow same-side deferred targets from name looking for name again"""
        chain = [name]
        target = self.edges[side].get(name)

        while target is not None:
            chain.append(target)
            if target == name:
                raise CircularChainError(chain, side)
            target = self.edges[side].get(target)

    def detect_symmetric(self, name: str, target: str, side: Side) -> None:
        if self.edges[side.opposite].get(target) == name:
            raise SymmetricConflictError(name, target)

    def detect_mixed_circular(self, name: str) -> None:
        """Look for a loop through name that alternates before/after targets

        Only items with a single target are followed: an item declaring both
        a before and an after target may still be placed by its other target.
        """
        if name in self.dual_targets:
            return

        stack = [[name]]
        visited = {name}

        while stack:
            chain = stack.pop()
            for side in Side:
                target = self.edges[side].get(chain[-1])
                if target is None:
                    continue
                if target == name:
                    raise CircularChainError(chain + [target], None)
                if target not in visited and target not in self.dual_targets:
                    visited.add(target)
                    stack.append(chain + [target])

    def check_resolved(self) -> None:
        """Reject loops that items with two targets could not break"""
        unresolved = [name for name in self.names if name not in self.weights]
        if not unresolved:
            return

        # every unresolved item waits on another unresolved item
        chain = [unresolved[0]]
        while True:
            node = chain[-1]
            target = next(self.edges[side][node] for side in Side if node in self.edges[side])
            if target in chain:
                raise CircularChainError(chain[chain.index(target):] + [target], None)
            chain.append(target)

    def ordered_names(self) -> list[str]:
        return sorted(self.weights, key=self.weights.__getitem__)
