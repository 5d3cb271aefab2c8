"""Heuristic scoring engine."""

from link_verdict.scoring.edit_distance import edit_distance
from link_verdict.scoring.engine import analyze, analyze_many
from link_verdict.scoring.verdict import verdict_from_score

__all__ = ["analyze", "analyze_many", "edit_distance", "verdict_from_score"]
