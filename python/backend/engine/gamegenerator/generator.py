"""Generates puzzles whose rule set pins down exactly one tile order."""

from __future__ import annotations

import logging
import random

from backend.engine.errors import PuzzleGenerationError, UnsatisfiableRulesError
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.rule import (
    OrderRule,
    Ordering,
    PositionRule,
    ProximityRule,
    Rule,
    RuleSet,
    mirrored,
)
from backend.models.tiles import TILE_COUNT, check_tile_count

logger = logging.getLogger(__name__)

# Random picks allowed when looking for a pair without a rule of the kind.
MAX_PAIR_TRIES = 10
# Rounds allowed before generation is abandoned as non-terminating.
MAX_ROUNDS = 1000

_RuleLists = list[list[Rule]]


class PuzzleGenerator:
    """Builds puzzles by adding rules true of a hidden target order.

    Rules are added one random round at a time until exactly one ordering
    of the tiles satisfies all of them. Because every rule holds for the
    target, that ordering is the target.
    """

    @staticmethod
    def generate(
        tile_count: int = TILE_COUNT,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> GameState:
        """Return a fresh puzzle state with a uniquely solvable rule set."""
        check_tile_count(tile_count)
        if rng is None:
            rng = random.Random(seed)

        target = list(range(tile_count))
        rng.shuffle(target)
        logger.debug("target order %s", target)

        rules = PuzzleGenerator.synthesize(target, rng)

        arrangement = list(range(tile_count))
        rng.shuffle(arrangement)
        return GameState(arrangement, rules)

    @staticmethod
    def synthesize(target: list[int], rng: random.Random) -> RuleSet:
        """Add random valid rules until *target* is the only solution."""
        tile_count = len(target)
        rules: _RuleLists = [[] for _ in range(tile_count)]

        for round_no in range(1, MAX_ROUNDS + 1):
            if not PuzzleGenerator.add_random_rule(target, rules, rng):
                continue

            frozen = PuzzleGenerator._freeze(rules)
            solutions = Solver.count_solutions(frozen, tile_count, limit=2)
            logger.debug("round %d: %d+ solutions", round_no, solutions)
            if solutions == 0:
                logger.error("No winning configurations found: %s", frozen)
                raise UnsatisfiableRulesError(
                    f"Rule set for target {target} admits no ordering."
                )
            if solutions == 1:
                logger.info(
                    "Generated %d-tile puzzle in %d rounds with %d rules",
                    tile_count,
                    round_no,
                    sum(len(r) for r in frozen),
                )
                return frozen

        raise PuzzleGenerationError(
            f"No unique rule set for {tile_count} tiles after {MAX_ROUNDS} rounds."
        )

    # -- rule synthesis -------------------------------------------------------

    @staticmethod
    def add_random_rule(
        target: list[int], rules: _RuleLists, rng: random.Random
    ) -> bool:
        """Try to add one rule of a random kind. Returns True if one was added."""
        add = rng.choice(
            (
                PuzzleGenerator.add_order_rule,
                PuzzleGenerator.add_proximity_rule,
                PuzzleGenerator.add_position_rule,
            )
        )
        return add(target, rules, rng)

    @staticmethod
    def add_order_rule(
        target: list[int], rules: _RuleLists, rng: random.Random
    ) -> bool:
        pair = PuzzleGenerator._pick_free_pair(rules, OrderRule, rng)
        if pair is None:
            return False
        tile, other = pair
        ordering = (
            Ordering.BEFORE
            if target.index(tile) < target.index(other)
            else Ordering.AFTER
        )
        PuzzleGenerator._add_pair(rules, tile, OrderRule(other, ordering))
        return True

    @staticmethod
    def add_proximity_rule(
        target: list[int], rules: _RuleLists, rng: random.Random
    ) -> bool:
        pair = PuzzleGenerator._pick_free_pair(rules, ProximityRule, rng)
        if pair is None:
            return False
        tile, other = pair
        distance = abs(target.index(tile) - target.index(other))
        PuzzleGenerator._add_pair(rules, tile, ProximityRule(other, distance))
        return True

    @staticmethod
    def add_position_rule(
        target: list[int], rules: _RuleLists, rng: random.Random
    ) -> bool:
        free = [
            tile
            for tile, tile_rules in enumerate(rules)
            if not any(isinstance(r, PositionRule) for r in tile_rules)
        ]
        if not free:
            return False

        tile = rng.randrange(len(rules))
        while tile not in free:
            tile = rng.randrange(len(rules))

        rule = PositionRule(target.index(tile))
        rules[tile].append(rule)
        logger.debug("tile %d: %s", tile, rule)
        return True

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _pick_free_pair(
        rules: _RuleLists, kind: type, rng: random.Random
    ) -> tuple[int, int] | None:
        """Pick two distinct tiles not yet linked by a rule of *kind*."""
        for _ in range(MAX_PAIR_TRIES):
            tile, other = rng.sample(range(len(rules)), 2)
            taken = any(
                isinstance(r, kind) and r.other_tile == other for r in rules[tile]
            )
            if not taken:
                return tile, other
        return None

    @staticmethod
    def _add_pair(
        rules: _RuleLists, tile: int, rule: OrderRule | ProximityRule
    ) -> None:
        """Record *rule* on *tile* and its mirror on the referenced tile."""
        rules[tile].append(rule)
        rules[rule.other_tile].append(mirrored(rule, tile))
        logger.debug("tile %d: %s (mirrored on %d)", tile, rule, rule.other_tile)

    @staticmethod
    def _freeze(rules: _RuleLists) -> RuleSet:
        return tuple(tuple(tile_rules) for tile_rules in rules)
