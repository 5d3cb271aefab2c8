"""Lexical URL risk scoring: Safe, Suspicious or Fraudulent."""

from link_verdict.domain.url.models import AnalysisResult, RuleHit
from link_verdict.policy.lists import HeuristicLists
from link_verdict.scoring.engine import analyze, analyze_many

__all__ = [
    "AnalysisResult",
    "HeuristicLists",
    "RuleHit",
    "analyze",
    "analyze_many",
]
