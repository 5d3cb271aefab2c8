"""Popular domains, suspicious TLDs and fraud keywords."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from link_verdict.config.settings import AppConfig

DEFAULT_POPULAR_DOMAINS = (
    "google.com",
    "facebook.com",
    "youtube.com",
    "amazon.com",
    "twitter.com",
    "linkedin.com",
    "apple.com",
    "github.com",
    "microsoft.com",
    "paypal.com",
    "wikipedia.org",
    "instagram.com",
)
DEFAULT_SUSPICIOUS_TLDS = (".tk", ".ml", ".ga", ".cf", ".gq", ".xyz", ".top", ".biz")
DEFAULT_FRAUD_KEYWORDS = (
    "login",
    "verify",
    "update",
    "secure",
    "bank",
    "account",
    "paypal",
    "confirm",
    "password",
    "signin",
    "click",
    "free",
    "winner",
    "claim",
    "urgent",
)


def _clean(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(str(item).strip().lower() for item in items if str(item).strip()))


def _clean_tlds(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(item if item.startswith(".") else f".{item}" for item in _clean(items)))


@dataclass(frozen=True)
class HeuristicLists:
    popular_domains: tuple[str, ...] = field(default=DEFAULT_POPULAR_DOMAINS)
    suspicious_tlds: tuple[str, ...] = field(default=DEFAULT_SUSPICIOUS_TLDS)
    fraud_keywords: tuple[str, ...] = field(default=DEFAULT_FRAUD_KEYWORDS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "popular_domains", _clean(self.popular_domains))
        object.__setattr__(self, "suspicious_tlds", _clean_tlds(self.suspicious_tlds))
        object.__setattr__(self, "fraud_keywords", _clean(self.fraud_keywords))

    @classmethod
    def from_config(cls, cfg: AppConfig) -> HeuristicLists:
        return cls(
            popular_domains=tuple(cfg.popular_domains),
            suspicious_tlds=tuple(cfg.suspicious_tlds),
            fraud_keywords=tuple(cfg.fraud_keywords),
        )
