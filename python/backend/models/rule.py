"""Rule vocabulary and the single-rule satisfaction predicate.

A rule belongs to one *owner* tile and is checked against an arrangement,
i.e. a sequence holding every tile identity exactly once.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.models.tiles import symbol


class Ordering(StrEnum):
    BEFORE = "before"
    AFTER = "after"

    def inverted(self) -> Ordering:
        return Ordering.AFTER if self is Ordering.BEFORE else Ordering.BEFORE


@dataclass(frozen=True)
class OrderRule:
    """The owner sits before/after ``other_tile``."""

    other_tile: int
    ordering: Ordering

    def describe(self) -> str:
        return f"{self.ordering.value} {symbol(self.other_tile)}"


@dataclass(frozen=True)
class ProximityRule:
    """The owner sits exactly ``distance`` slots away from ``other_tile``."""

    other_tile: int
    distance: int

    def describe(self) -> str:
        return f"{self.distance} away from {symbol(self.other_tile)}"


@dataclass(frozen=True)
class PositionRule:
    """The owner sits at index ``position``."""

    position: int

    def describe(self) -> str:
        return f"at position {self.position + 1}"


Rule = OrderRule | ProximityRule | PositionRule

# Indexed by owner tile.
RuleSet = tuple[tuple[Rule, ...], ...]


def satisfies(rule: Rule, arrangement: Sequence[int], owner: int) -> bool:
    """Return True if *rule*, owned by *owner*, holds in *arrangement*."""
    index = arrangement.index(owner)
    if isinstance(rule, PositionRule):
        return index == rule.position

    other = arrangement.index(rule.other_tile)
    if isinstance(rule, ProximityRule):
        return abs(index - other) == rule.distance
    if rule.ordering is Ordering.BEFORE:
        return index < other
    return index > other


def mirrored(rule: Rule, owner: int) -> Rule:
    """Return the reciprocal of *rule* as seen from its referenced tile."""
    if isinstance(rule, OrderRule):
        return OrderRule(other_tile=owner, ordering=rule.ordering.inverted())
    if isinstance(rule, ProximityRule):
        return ProximityRule(other_tile=owner, distance=rule.distance)
    raise ValueError("Position rules reference no other tile.")
