"""Reference lists the scoring rules consult."""

from link_verdict.policy.lists import (
    DEFAULT_FRAUD_KEYWORDS,
    DEFAULT_POPULAR_DOMAINS,
    DEFAULT_SUSPICIOUS_TLDS,
    HeuristicLists,
)

__all__ = [
    "DEFAULT_FRAUD_KEYWORDS",
    "DEFAULT_POPULAR_DOMAINS",
    "DEFAULT_SUSPICIOUS_TLDS",
    "HeuristicLists",
]
