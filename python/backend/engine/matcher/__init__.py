from backend.engine.matcher.evaluator import MatchState, classify, classify_all

__all__ = ["MatchState", "classify", "classify_all"]
