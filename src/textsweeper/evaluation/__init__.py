"""
Evaluation module for automated Minesweeper players.
"""
from .evaluator import EvaluationReport, Evaluator, GameRecord, evaluate_tiers

__all__ = ["EvaluationReport", "Evaluator", "GameRecord", "evaluate_tiers"]
