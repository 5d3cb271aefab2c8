"""URL heuristic engine.

``analyze`` is pure: the same URL and lists always produce the same score,
verdict and reason order. It never raises for string input.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from link_verdict.domain.url.extract import parse_url
from link_verdict.domain.url.models import AnalysisResult, RuleHit
from link_verdict.policy.lists import HeuristicLists
from link_verdict.scoring.rules import (
    HOSTNAME_RULES,
    PARSE_FAILURE_REASON,
    PARSE_FAILURE_WEIGHT,
    PRECHECK_RULES,
    ScoringContext,
    run_rules,
)
from link_verdict.scoring.verdict import SHORT_CIRCUIT_VERDICT, verdict_from_score

logger = logging.getLogger(__name__)

_DEFAULT_LISTS = HeuristicLists()


def _coerce(url: Any) -> str:
    if url is None:
        return ""
    return url if isinstance(url, str) else str(url)


def _build_result(url: str, hostname: str | None, hits: list[RuleHit], verdict: str, *, short_circuited: bool) -> AnalysisResult:
    return AnalysisResult(
        url=url,
        hostname=hostname,
        score=sum(hit.weight for hit in hits),
        verdict=verdict,
        reasons=[hit.reason for hit in hits],
        hits=hits,
        short_circuited=short_circuited,
    )


def analyze(url: str, lists: HeuristicLists | None = None) -> AnalysisResult:
    text = _coerce(url)
    active = lists if lists is not None else _DEFAULT_LISTS
    parsed = parse_url(text)
    ctx = ScoringContext(url=text, parsed=parsed, lists=active)

    hits = run_rules(PRECHECK_RULES, ctx)

    if parsed is None:
        hits.append(RuleHit(rule="hostname_parse_failure", reason=PARSE_FAILURE_REASON, weight=PARSE_FAILURE_WEIGHT))
        logger.info("hostname could not be parsed; forcing %s for %r", SHORT_CIRCUIT_VERDICT, text)
        return _build_result(text, None, hits, SHORT_CIRCUIT_VERDICT, short_circuited=True)

    hits.extend(run_rules(HOSTNAME_RULES, ctx))
    score = sum(hit.weight for hit in hits)
    verdict = verdict_from_score(score)
    logger.debug("analyzed %r host=%s score=%d verdict=%s", text, parsed.hostname, score, verdict)
    return _build_result(text, parsed.hostname, hits, verdict, short_circuited=False)


def analyze_many(urls: Iterable[str], lists: HeuristicLists | None = None) -> list[AnalysisResult]:
    return [analyze(url, lists) for url in urls]
