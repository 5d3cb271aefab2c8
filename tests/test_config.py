import pytest

from link_verdict.config.settings import AppConfig, load_config
from link_verdict.core.errors import ConfigError, LinkVerdictError
from link_verdict.policy.lists import (
    DEFAULT_FRAUD_KEYWORDS,
    DEFAULT_POPULAR_DOMAINS,
    DEFAULT_SUSPICIOUS_TLDS,
    HeuristicLists,
)


def test_load_config_packaged_defaults():
    cfg, raw = load_config()
    assert isinstance(raw, dict)
    assert cfg.log_level == "INFO"
    assert tuple(cfg.popular_domains) == DEFAULT_POPULAR_DOMAINS
    assert tuple(cfg.suspicious_tlds) == DEFAULT_SUSPICIOUS_TLDS
    assert tuple(cfg.fraud_keywords) == DEFAULT_FRAUD_KEYWORDS


def test_missing_file_falls_back_to_builtin_lists(tmp_path):
    cfg, raw = load_config(tmp_path / "absent.yaml")
    assert raw == {}
    assert tuple(cfg.popular_domains) == DEFAULT_POPULAR_DOMAINS


def test_yaml_file_overrides_lists(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        "log_level: debug\npopular_domains: [example.com]\nsuspicious_tlds: zip, mov\n",
        encoding="utf-8",
    )
    cfg, _ = load_config(path)
    assert cfg.log_level == "debug"
    assert cfg.popular_domains == ["example.com"]
    assert cfg.suspicious_tlds == ["zip", "mov"]
    assert tuple(cfg.fraud_keywords) == DEFAULT_FRAUD_KEYWORDS
    assert cfg.default_config_path == str(path)


def test_env_overrides_take_precedence(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("fraud_keywords: [login]\n", encoding="utf-8")
    monkeypatch.setenv("LINK_VERDICT_CONFIG_PATH", str(path))
    monkeypatch.setenv("LINK_VERDICT_FRAUD_KEYWORDS", "gift, prize ,gift")
    monkeypatch.setenv("LINK_VERDICT_LOG_LEVEL", "WARNING")
    cfg, raw = load_config()
    assert raw == {"fraud_keywords": ["login"]}
    assert cfg.fraud_keywords == ["gift", "prize"]
    assert cfg.log_level == "WARNING"


def test_malformed_yaml_raises_config_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("popular_domains: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_mapping_yaml_raises_config_error(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- google.com\n", encoding="utf-8")
    with pytest.raises(LinkVerdictError):
        load_config(path)


def test_wrong_list_type_raises_config_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("popular_domains: 42\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_lists_from_config_are_normalized():
    cfg = AppConfig(
        popular_domains=[" Example.COM ", "example.com"],
        suspicious_tlds=["TK", ".xyz"],
        fraud_keywords=["Login", ""],
    )
    lists = HeuristicLists.from_config(cfg)
    assert lists.popular_domains == ("example.com",)
    assert lists.suspicious_tlds == (".tk", ".xyz")
    assert lists.fraud_keywords == ("login",)
