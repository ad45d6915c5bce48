"""Exhaustive solver over every ordering of the tile set."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from functools import cache

from backend.engine.errors import AmbiguousRulesError, UnsatisfiableRulesError
from backend.models.rule import RuleSet, satisfies

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static.

    Every query walks all ``N!`` orderings, which is only viable for the
    small tile counts the game supports.
    """

    @staticmethod
    @cache
    def permutations(tile_count: int) -> tuple[tuple[int, ...], ...]:
        """Return every ordering of ``0..tile_count-1`` (cached per count)."""
        orders = tuple(itertools.permutations(range(tile_count)))
        logger.debug("%d possible orders for %d tiles", len(orders), tile_count)
        return orders

    @staticmethod
    def is_winning(rules: RuleSet, arrangement: Sequence[int]) -> bool:
        """Return True if every rule of every tile holds in *arrangement*."""
        return all(
            satisfies(rule, arrangement, tile)
            for tile, tile_rules in enumerate(rules)
            for rule in tile_rules
        )

    @staticmethod
    def count_solutions(
        rules: RuleSet, tile_count: int, limit: int | None = None
    ) -> int:
        """Count orderings satisfying *rules*, stopping once *limit* is hit."""
        matching = 0
        for order in Solver.permutations(tile_count):
            if Solver.is_winning(rules, order):
                matching += 1
                if limit is not None and matching >= limit:
                    break
        return matching

    @staticmethod
    def solve(rules: RuleSet, tile_count: int) -> tuple[int, ...]:
        """Return the single ordering that satisfies *rules*.

        Raises ``UnsatisfiableRulesError`` if there is none and
        ``AmbiguousRulesError`` if there is more than one.
        """
        found: tuple[int, ...] | None = None
        for order in Solver.permutations(tile_count):
            if not Solver.is_winning(rules, order):
                continue
            if found is not None:
                raise AmbiguousRulesError(
                    f"Rule set admits several solutions, e.g. {found} and {order}."
                )
            found = order
        if found is None:
            raise UnsatisfiableRulesError("No ordering satisfies the rule set.")
        return found

    @staticmethod
    def hint(rules: RuleSet, arrangement: Sequence[int]) -> tuple[int, int] | None:
        """Return the next ``(tile, destination)`` move, or ``None`` if solved.

        The tile that belongs in the leftmost wrong slot is moved there,
        so the solved prefix grows by one with every hint.
        """
        solution = Solver.solve(rules, len(arrangement))
        for index, (have, want) in enumerate(zip(arrangement, solution)):
            if have != want:
                return want, index
        return None
