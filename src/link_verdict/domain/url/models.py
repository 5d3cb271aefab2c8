"""Analysis result models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Verdict = Literal["Safe", "Suspicious", "Fraudulent"]

VERDICT_SEVERITY: tuple[Verdict, ...] = ("Safe", "Suspicious", "Fraudulent")


class RuleHit(BaseModel):
    rule: str
    reason: str
    weight: int = Field(ge=0)


class AnalysisResult(BaseModel):
    url: str
    hostname: str | None = None
    score: int = Field(ge=0, default=0)
    verdict: Verdict = "Safe"
    reasons: list[str] = Field(default_factory=list)
    hits: list[RuleHit] = Field(default_factory=list)
    short_circuited: bool = False

    def summary(self) -> dict[str, object]:
        return {"score": self.score, "verdict": self.verdict, "reasons": list(self.reasons)}
