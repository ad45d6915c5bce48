"""Puzzle generation — uniqueness, reciprocity, and failure handling.

Every generated puzzle is re-checked by brute force: exactly one ordering
of the tiles may satisfy its rule set.
"""

from __future__ import annotations

import itertools
import logging
import random

import pytest

from backend.engine.errors import PuzzleGenerationError, UnsatisfiableRulesError
from backend.engine.gamegenerator import PuzzleGenerator
from backend.engine.gamegenerator import generator as generator_module
from backend.engine.gamesolver import Solver
from backend.models.rule import (
    OrderRule,
    Ordering,
    PositionRule,
    ProximityRule,
    mirrored,
)

_CASES = [(n, seed) for n in range(2, 7) for seed in range(8)]


def _ids(case: tuple[int, int]) -> str:
    return f"{case[0]}tiles-seed{case[1]}"


def _satisfiers(rules, tile_count: int) -> list[tuple[int, ...]]:
    return [
        order
        for order in itertools.permutations(range(tile_count))
        if Solver.is_winning(rules, order)
    ]


# -- generate -----------------------------------------------------------------


@pytest.mark.parametrize("case", _CASES, ids=_ids)
def test_exactly_one_ordering_satisfies(case: tuple[int, int]) -> None:
    tile_count, seed = case
    state = PuzzleGenerator.generate(tile_count, seed=seed)

    assert len(state.rules) == tile_count
    assert any(state.rules), "Generated rule set is empty"
    assert len(_satisfiers(state.rules, tile_count)) == 1


@pytest.mark.parametrize("case", _CASES, ids=_ids)
def test_paired_rules_are_reciprocal(case: tuple[int, int]) -> None:
    tile_count, seed = case
    state = PuzzleGenerator.generate(tile_count, seed=seed)

    for tile, tile_rules in enumerate(state.rules):
        for rule in tile_rules:
            if isinstance(rule, PositionRule):
                continue
            assert rule.other_tile != tile
            assert mirrored(rule, tile) in state.rules[rule.other_tile], (
                f"Tile {tile} has {rule} but tile {rule.other_tile} lacks its mirror"
            )


@pytest.mark.parametrize("tile_count", range(2, 7))
def test_target_is_the_unique_solution(tile_count: int) -> None:
    rng = random.Random(tile_count)
    target = list(range(tile_count))
    rng.shuffle(target)

    rules = PuzzleGenerator.synthesize(target, rng)

    assert Solver.solve(rules, tile_count) == tuple(target)


def test_start_arrangement_is_a_permutation() -> None:
    for seed in range(20):
        state = PuzzleGenerator.generate(5, seed=seed)
        assert sorted(state.arrangement) == [0, 1, 2, 3, 4]


def test_same_seed_same_puzzle() -> None:
    a = PuzzleGenerator.generate(5, seed=1234)
    b = PuzzleGenerator.generate(5, seed=1234)
    assert a.rules == b.rules
    assert a.arrangement == b.arrangement


def test_rule_set_is_immutable() -> None:
    state = PuzzleGenerator.generate(4, seed=3)
    assert isinstance(state.rules, tuple)
    assert all(isinstance(tile_rules, tuple) for tile_rules in state.rules)


@pytest.mark.parametrize("tile_count", [0, 1, 8])
def test_unsupported_tile_count(tile_count: int) -> None:
    with pytest.raises(ValueError):
        PuzzleGenerator.generate(tile_count)


# -- per-kind synthesis -------------------------------------------------------


def test_order_rule_follows_target() -> None:
    target = [2, 0, 1]
    rules: list[list] = [[], [], []]
    assert PuzzleGenerator.add_order_rule(target, rules, random.Random(0))

    owner = next(tile for tile, tile_rules in enumerate(rules) if tile_rules)
    rule = rules[owner][0]
    expected = (
        Ordering.BEFORE
        if target.index(owner) < target.index(rule.other_tile)
        else Ordering.AFTER
    )
    assert rule.ordering is expected
    assert rules[rule.other_tile] == [mirrored(rule, owner)]


def test_proximity_rule_uses_target_distance() -> None:
    target = [3, 1, 0, 2]
    rules: list[list] = [[], [], [], []]
    assert PuzzleGenerator.add_proximity_rule(target, rules, random.Random(5))

    for tile, tile_rules in enumerate(rules):
        for rule in tile_rules:
            assert isinstance(rule, ProximityRule)
            assert rule.distance == abs(
                target.index(tile) - target.index(rule.other_tile)
            )
    assert sum(len(r) for r in rules) == 2


def test_order_synthesis_gives_up_when_pairs_are_taken() -> None:
    rules = [
        [OrderRule(1, Ordering.BEFORE)],
        [OrderRule(0, Ordering.AFTER)],
    ]
    assert not PuzzleGenerator.add_order_rule([0, 1], rules, random.Random(0))
    assert rules == [[OrderRule(1, Ordering.BEFORE)], [OrderRule(0, Ordering.AFTER)]]


def test_proximity_synthesis_gives_up_when_pairs_are_taken() -> None:
    rules = [[ProximityRule(1, 1)], [ProximityRule(0, 1)]]
    assert not PuzzleGenerator.add_proximity_rule([1, 0], rules, random.Random(0))
    assert len(rules[0]) == len(rules[1]) == 1


def test_position_rule_goes_to_a_free_tile() -> None:
    target = [1, 2, 0]
    rules = [[PositionRule(2)], [], [PositionRule(1)]]
    assert PuzzleGenerator.add_position_rule(target, rules, random.Random(9))
    assert rules[1] == [PositionRule(0)]


def test_position_synthesis_fails_when_every_tile_has_one() -> None:
    rules = [[PositionRule(1)], [PositionRule(0)]]
    assert not PuzzleGenerator.add_position_rule([1, 0], rules, random.Random(0))
    assert rules == [[PositionRule(1)], [PositionRule(0)]]


# -- failure handling ---------------------------------------------------------


def test_contradictory_rules_abort_generation(monkeypatch, caplog) -> None:
    def contradict(target, rules, rng) -> bool:
        rules[0].append(PositionRule(0))
        rules[1].append(PositionRule(0))
        return True

    monkeypatch.setattr(PuzzleGenerator, "add_random_rule", staticmethod(contradict))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(UnsatisfiableRulesError):
            PuzzleGenerator.generate(3, seed=0)
    assert "No winning configurations found" in caplog.text


def test_round_cap_aborts_generation(monkeypatch) -> None:
    monkeypatch.setattr(generator_module, "MAX_ROUNDS", 5)
    monkeypatch.setattr(
        PuzzleGenerator, "add_random_rule", staticmethod(lambda *args: False)
    )

    with pytest.raises(PuzzleGenerationError) as excinfo:
        PuzzleGenerator.generate(4, seed=0)
    assert not isinstance(excinfo.value, UnsatisfiableRulesError)
