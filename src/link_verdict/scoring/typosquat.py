"""Look-alike detection against popular domains."""

from __future__ import annotations

import re
from typing import Iterable

from link_verdict.scoring.edit_distance import edit_distance

DEFAULT_MAX_RATIO = 0.25

_HOMOGLYPHS = str.maketrans({"0": "o", "1": "l", "3": "e"})
_NON_HOST_CHARS = re.compile(r"[^\w.]", re.ASCII)


def normalize_hostname(host: str) -> str:
    return _NON_HOST_CHARS.sub("", (host or "").translate(_HOMOGLYPHS))


def find_lookalike(
    host: str,
    popular_domains: Iterable[str],
    *,
    max_ratio: float = DEFAULT_MAX_RATIO,
) -> str | None:
    """Return the first popular domain ``host`` is a near miss of, if any.

    Exact matches after normalization are not look-alikes.
    """

    normalized = normalize_hostname(host)
    for domain in popular_domains:
        longest = max(len(normalized), len(domain))
        if longest == 0 or normalized == domain:
            continue
        if edit_distance(normalized, domain) / longest <= max_ratio:
            return domain
    return None
