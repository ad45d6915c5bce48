from backend.models.rule import (
    OrderRule,
    Ordering,
    PositionRule,
    ProximityRule,
    Rule,
    RuleSet,
    mirrored,
    satisfies,
)
from backend.models.tiles import TILE_COUNT, symbol

__all__ = [
    "OrderRule",
    "Ordering",
    "PositionRule",
    "ProximityRule",
    "Rule",
    "RuleSet",
    "TILE_COUNT",
    "mirrored",
    "satisfies",
    "symbol",
]
