"""Core gameplay logic — processes reorders and reports tile feedback."""

from __future__ import annotations

from backend.engine.gamegenerator import PuzzleGenerator
from backend.engine.gamestate import GameState
from backend.engine.matcher import MatchState, classify, classify_all
from backend.models.tiles import TILE_COUNT


def reorder(arrangement: list[int], moved_tile: int, destination: int) -> None:
    """Move *moved_tile* to index *destination*, shifting the tiles between.

    Raises ``ValueError`` for a tile that is not in *arrangement* or a
    destination outside it; the arrangement is left untouched in that case.
    """
    if moved_tile not in arrangement:
        raise ValueError(f"Tile {moved_tile} is not in {arrangement}.")
    if not 0 <= destination < len(arrangement):
        raise ValueError(
            f"Destination {destination} is outside 0..{len(arrangement) - 1}."
        )
    arrangement.remove(moved_tile)
    arrangement.insert(destination, moved_tile)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, tile_count: int = TILE_COUNT, seed: int | None = None) -> None:
        self.tile_count = tile_count
        self.state = PuzzleGenerator.generate(tile_count, seed=seed)

    @classmethod
    def from_state(cls, state: GameState) -> "GamePlay":
        """Create a game session around an existing puzzle state."""
        obj = object.__new__(cls)
        obj.tile_count = state.tile_count
        obj.state = state
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, tile: int, destination: int) -> bool:
        """Move *tile* to *destination*.

        Returns False if the tile already sits there (nothing counted).
        """
        arrangement = self.state.arrangement
        if tile in arrangement and arrangement.index(tile) == destination:
            return False
        reorder(arrangement, tile, destination)
        self.state.increment_moves()
        return True

    def shift(self, tile: int, step: int) -> bool:
        """Nudge *tile* by *step* slots, stopping at either end of the row."""
        arrangement = self.state.arrangement
        destination = arrangement.index(tile) + step
        destination = max(0, min(len(arrangement) - 1, destination))
        return self.move(tile, destination)

    # -- queries --------------------------------------------------------------

    def classify(self, tile: int) -> MatchState:
        return classify(self.state.rules[tile], self.state.arrangement, tile)

    def statuses(self) -> list[MatchState]:
        return classify_all(self.state.rules, self.state.arrangement)

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
