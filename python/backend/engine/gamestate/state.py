"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from backend.engine.gamesolver import Solver
from backend.models.rule import RuleSet


class GameState:
    """Holds the current arrangement, the rule set, move counter, and time.

    The arrangement is mutated in place by reorders; the rule set is fixed
    once generated. The target order is not kept: it is the one
    arrangement that satisfies every rule.
    """

    def __init__(self, arrangement: list[int], rules: RuleSet) -> None:
        if sorted(arrangement) != list(range(len(rules))):
            raise ValueError(
                f"Arrangement {arrangement} is not a permutation of "
                f"{len(rules)} tiles."
            )
        self.arrangement = arrangement
        self.rules = rules
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    @property
    def tile_count(self) -> int:
        return len(self.rules)

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return Solver.is_winning(self.rules, self.arrangement)
