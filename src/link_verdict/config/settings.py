"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from link_verdict.core.errors import ConfigError
from link_verdict.policy.lists import (
    DEFAULT_FRAUD_KEYWORDS,
    DEFAULT_POPULAR_DOMAINS,
    DEFAULT_SUSPICIOUS_TLDS,
)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
ENV_PREFIX = "LINK_VERDICT_"


class AppConfig(BaseModel):

    log_level: str = Field(default="INFO")
    popular_domains: list[str] = Field(default_factory=lambda: list(DEFAULT_POPULAR_DOMAINS))
    suspicious_tlds: list[str] = Field(default_factory=lambda: list(DEFAULT_SUSPICIOUS_TLDS))
    fraud_keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_FRAUD_KEYWORDS))
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read config file {p}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"config file {p} must contain a mapping at the top level")
    return payload


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(ENV_PREFIX + name)
    return value if value not in (None, "") else fallback


def _parse_list(raw: Any, fallback: tuple[str, ...]) -> list[str]:
    if raw is None:
        return list(fallback)
    if isinstance(raw, str):
        return list(dict.fromkeys(item.strip() for item in raw.split(",") if item.strip()))
    if isinstance(raw, (list, tuple)):
        return list(dict.fromkeys(str(item).strip() for item in raw if str(item).strip()))
    raise ConfigError(f"expected a list or comma-separated string, got {type(raw).__name__}")


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(ENV_PREFIX + "CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "log_level": _parse_str(_pick_env("LOG_LEVEL", merged.get("log_level")), "INFO"),
        "popular_domains": _parse_list(
            _pick_env("POPULAR_DOMAINS", merged.get("popular_domains")),
            DEFAULT_POPULAR_DOMAINS,
        ),
        "suspicious_tlds": _parse_list(
            _pick_env("SUSPICIOUS_TLDS", merged.get("suspicious_tlds")),
            DEFAULT_SUSPICIOUS_TLDS,
        ),
        "fraud_keywords": _parse_list(
            _pick_env("FRAUD_KEYWORDS", merged.get("fraud_keywords")),
            DEFAULT_FRAUD_KEYWORDS,
        ),
        "default_config_path": str(default_path),
    }

    try:
        cfg = AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration in {default_path}: {exc}") from exc
    return cfg, merged
