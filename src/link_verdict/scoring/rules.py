"""Declarative rule table for URL scoring.

Every rule is data: a name, a weight, and an ``evaluate`` callable returning
the reasons it raises for a given context. Each reason contributes the rule's
weight once, so a rule may contribute zero, one or (for keywords) several
times. ``run_rules`` is the only place rules are executed.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable, Iterable

from link_verdict.domain.url.extract import ParsedUrl
from link_verdict.domain.url.models import RuleHit
from link_verdict.policy.lists import HeuristicLists
from link_verdict.scoring.typosquat import find_lookalike

PARSE_FAILURE_REASON = "Cannot parse hostname."
PARSE_FAILURE_WEIGHT = 3


@dataclass(frozen=True)
class ScoringContext:
    url: str
    parsed: ParsedUrl | None
    lists: HeuristicLists

    @property
    def hostname(self) -> str:
        return self.parsed.hostname if self.parsed else ""

    @property
    def path_and_query(self) -> str:
        return self.parsed.path_and_query if self.parsed else ""


Target = Callable[[ScoringContext], str]

_SCHEMED_URL = re.compile(r'(ftp|http|https)://[^ "]+')
_BARE_DOMAIN = re.compile(r'[^ "]+\.[^ "]+')


def url_text(ctx: ScoringContext) -> str:
    return ctx.url


def hostname_text(ctx: ScoringContext) -> str:
    return ctx.hostname


def path_text(ctx: ScoringContext) -> str:
    return ctx.path_and_query


@dataclass(frozen=True)
class Rule:
    name: str
    weight: int
    evaluate: Callable[[ScoringContext], list[str]]


def pattern_rule(name: str, target: Target, pattern: str, weight: int, reason: str, *, full: bool = False) -> Rule:
    compiled = re.compile(pattern)

    def _evaluate(ctx: ScoringContext) -> list[str]:
        text = target(ctx)
        matched = compiled.fullmatch(text) if full else compiled.search(text)
        return [reason] if matched else []

    return Rule(name=name, weight=weight, evaluate=_evaluate)


def count_rule(name: str, target: Target, pattern: str, threshold: int, weight: int, reason: str) -> Rule:
    compiled = re.compile(pattern)

    def _evaluate(ctx: ScoringContext) -> list[str]:
        return [reason] if len(compiled.findall(target(ctx))) >= threshold else []

    return Rule(name=name, weight=weight, evaluate=_evaluate)


def length_rule(name: str, target: Target, limit: int, weight: int, reason: str) -> Rule:
    def _evaluate(ctx: ScoringContext) -> list[str]:
        return [reason] if len(target(ctx)) > limit else []

    return Rule(name=name, weight=weight, evaluate=_evaluate)


def _malformed_protocol(ctx: ScoringContext) -> list[str]:
    if _SCHEMED_URL.fullmatch(ctx.url) or _BARE_DOMAIN.fullmatch(ctx.url):
        return []
    return ["Malformed or missing protocol."]


def _suspicious_tld(ctx: ScoringContext) -> list[str]:
    for tld in ctx.lists.suspicious_tlds:
        if ctx.hostname.endswith(tld):
            return [f"Suspicious TLD: {tld}"]
    return []


def _fraud_keywords(ctx: ScoringContext) -> list[str]:
    lowered = ctx.url.lower()
    return [f'Contains keyword "{kw}".' for kw in ctx.lists.fraud_keywords if kw in lowered]


def _typosquat(ctx: ScoringContext) -> list[str]:
    domain = find_lookalike(ctx.hostname, ctx.lists.popular_domains)
    if domain is None:
        return []
    return [f'Looks similar to popular site "{domain}" (possible typosquat).']


PRECHECK_RULES: tuple[Rule, ...] = (
    Rule(name="malformed_protocol", weight=1, evaluate=_malformed_protocol),
)

HOSTNAME_RULES: tuple[Rule, ...] = (
    pattern_rule("raw_ip", hostname_text, r"[0-9]{1,3}(\.[0-9]{1,3}){3}", 5, "Uses raw IP address.", full=True),
    length_rule("long_url", url_text, 100, 2, "Very long URL."),
    length_rule("long_hostname", hostname_text, 50, 2, "Very long hostname."),
    # three dots means four or more labels
    count_rule("multiple_subdomains", hostname_text, r"\.", 3, 2, "Multiple subdomains."),
    Rule(name="suspicious_tld", weight=3, evaluate=_suspicious_tld),
    pattern_rule("percent_encoding", url_text, r"%[0-9A-Fa-f]{2}", 1, "Contains percent-encoding."),
    pattern_rule("at_symbol", url_text, r"@", 4, "Contains '@' symbol."),
    count_rule("many_hyphens", hostname_text, r"-", 2, 1, "Many hyphens in domain."),
    count_rule("many_digits", hostname_text, r"[0-9]", 3, 1, "Many digits in domain."),
    Rule(name="fraud_keyword", weight=2, evaluate=_fraud_keywords),
    Rule(name="typosquat", weight=4, evaluate=_typosquat),
    length_rule("long_path", path_text, 80, 1, "Long path or query."),
    count_rule("many_query_params", path_text, r"[?&]", 5, 1, "Many query parameters."),
)


def run_rules(rules: Iterable[Rule], ctx: ScoringContext) -> list[RuleHit]:
    hits: list[RuleHit] = []
    for rule in rules:
        for reason in rule.evaluate(ctx):
            hits.append(RuleHit(rule=rule.name, reason=reason, weight=rule.weight))
    return hits
