"""URL parsing and result models."""

from link_verdict.domain.url.extract import (
    ParsedUrl,
    extract_hostname,
    has_scheme,
    parse_url,
)
from link_verdict.domain.url.models import AnalysisResult, RuleHit, Verdict

__all__ = [
    "AnalysisResult",
    "ParsedUrl",
    "RuleHit",
    "Verdict",
    "extract_hostname",
    "has_scheme",
    "parse_url",
]
