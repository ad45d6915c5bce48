from backend.engine.errors import (
    AmbiguousRulesError,
    PuzzleGenerationError,
    UnsatisfiableRulesError,
)

__all__ = ["AmbiguousRulesError", "PuzzleGenerationError", "UnsatisfiableRulesError"]
