"""Per-tile match feedback for the current arrangement."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from backend.models.rule import Rule, RuleSet, satisfies


class MatchState(StrEnum):
    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


def classify(
    rules: Sequence[Rule], arrangement: Sequence[int], tile: int
) -> MatchState:
    """Classify how many of *tile*'s rules hold in *arrangement*.

    All of them -> ``FULL`` (including a tile with no rules at all),
    none of them -> ``NONE``, anything in between -> ``PARTIAL``.
    """
    matched = sum(1 for rule in rules if satisfies(rule, arrangement, tile))
    if matched == len(rules):
        return MatchState.FULL
    if matched == 0:
        return MatchState.NONE
    return MatchState.PARTIAL


def classify_all(rules: RuleSet, arrangement: Sequence[int]) -> list[MatchState]:
    """Return the match state of every tile, indexed by tile identity."""
    return [
        classify(tile_rules, arrangement, tile)
        for tile, tile_rules in enumerate(rules)
    ]
