"""
Item and Position Structures
============================

Data structures shared by the position normalizer, the orderer and the
item loader.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Side(Enum):
    """Side of a relative position"""

    BEFORE = "before"
    AFTER = "after"

    @property
    def opposite(self) -> "Side":
        return Side.AFTER if self is Side.BEFORE else Side.BEFORE


class PositionKind(Enum):
    """Shape of a declared position"""

    NONE = "none"  # No preference
    FIRST = "first"
    LAST = "last"
    RELATIVE = "relative"  # before and/or after a sibling


@dataclass(frozen=True)
class Position:
    """
    Positional constraint of an item relative to its siblings.

    A relative position may carry a before-target, an after-target or both;
    the other kinds never carry targets.
    """

    kind: PositionKind = PositionKind.NONE
    before: str | None = None
    after: str | None = None

    @classmethod
    def none(cls) -> "Position":
        return cls()

    @classmethod
    def first(cls) -> "Position":
        return cls(PositionKind.FIRST)

    @classmethod
    def last(cls) -> "Position":
        return cls(PositionKind.LAST)

    @classmethod
    def before_(cls, target: str) -> "Position":
        return cls(PositionKind.RELATIVE, before=target)

    @classmethod
    def after_(cls, target: str) -> "Position":
        return cls(PositionKind.RELATIVE, after=target)

    @classmethod
    def between(cls, before: str, after: str) -> "Position":
        return cls(PositionKind.RELATIVE, before=before, after=after)

    @property
    def is_none(self) -> bool:
        return self.kind is PositionKind.NONE

    def target(self, side: Side) -> str | None:
        """Target declared for the given side, if any"""
        return self.before if side is Side.BEFORE else self.after

    def to_raw(self) -> Any:
        """Convert back to the raw shape used in item documents"""
        if self.kind is PositionKind.NONE:
            return None
        if self.kind is PositionKind.FIRST:
            return "first"
        if self.kind is PositionKind.LAST:
            return "last"

        raw = {}
        if self.before is not None:
            raw["before"] = self.before
        if self.after is not None:
            raw["after"] = self.after
        return raw

    def __str__(self) -> str:
        if self.kind is not PositionKind.RELATIVE:
            return self.kind.value
        parts = []
        if self.before is not None:
            parts.append(f"before {self.before}")
        if self.after is not None:
            parts.append(f"after {self.after}")
        return ", ".join(parts)


@dataclass(frozen=True)
class Item:
    """Named entity to be ordered among its siblings"""

    name: str
    position: Any = field(default_factory=Position)
