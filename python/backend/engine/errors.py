"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleGenerationError(RuntimeError):
    """Generation aborted; no puzzle state is returned."""


class UnsatisfiableRulesError(PuzzleGenerationError):
    """No ordering of the tiles satisfies the rule set.

    Synthesized rules are all true of the target, so hitting this during
    generation means synthesis itself is broken.
    """


class AmbiguousRulesError(ValueError):
    """More than one ordering of the tiles satisfies the rule set."""
