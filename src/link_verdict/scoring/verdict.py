"""Score to verdict mapping."""

from __future__ import annotations

from link_verdict.domain.url.models import VERDICT_SEVERITY, Verdict

FRAUDULENT_MIN_SCORE = 8
SUSPICIOUS_MIN_SCORE = 4

# Forced verdict when no hostname can be parsed; not derived from the score.
SHORT_CIRCUIT_VERDICT: Verdict = "Fraudulent"


def verdict_from_score(score: int) -> Verdict:
    if score >= FRAUDULENT_MIN_SCORE:
        return "Fraudulent"
    if score >= SUSPICIOUS_MIN_SCORE:
        return "Suspicious"
    return "Safe"


def severity(verdict: str) -> int:
    return VERDICT_SEVERITY.index(verdict)
