"""Unit tests for config.py"""

import pytest

from md2html.config import Settings, load_config


def test_load_config_defaults():
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings == Settings()
    assert settings.output_dir is None
    assert settings.debounce_ms == 100
    assert settings.log_level == "WARNING"


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml in the working directory are applied."""
    (tmp_path / "config.yaml").write_text("output_dir: site\nlang: fr\n")
    settings = load_config()
    assert settings.output_dir == "site"
    assert settings.lang == "fr"


def test_load_config_uses_env_output_dir(monkeypatch):
    """MD2HTML_OUTPUT_DIR env var is picked up by load_config."""
    monkeypatch.setenv("MD2HTML_OUTPUT_DIR", "public")
    assert load_config().output_dir == "public"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MD2HTML_LANG takes precedence over config.yaml lang."""
    (tmp_path / "config.yaml").write_text("lang: fr\n")
    monkeypatch.setenv("MD2HTML_LANG", "de")
    assert load_config().lang == "de"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MD2HTML_OUTPUT_DIR", "public")
    settings = load_config(overrides={"output_dir": "cli-out"})
    assert settings.output_dir == "cli-out"


def test_load_config_none_override_ignored(monkeypatch):
    """None-valued overrides (unset CLI flags) leave lower layers alone."""
    monkeypatch.setenv("MD2HTML_OUTPUT_DIR", "public")
    settings = load_config(overrides={"output_dir": None})
    assert settings.output_dir == "public"


def test_load_config_env_debounce_coerced(monkeypatch):
    """MD2HTML_DEBOUNCE_MS env var is coerced to int."""
    monkeypatch.setenv("MD2HTML_DEBOUNCE_MS", "250")
    assert load_config().debounce_ms == 250


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_yaml_not_a_mapping(tmp_path):
    """A YAML list at the top level is rejected."""
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("field,value", [
    ("debounce_ms", 0),
    ("log_level", "LOUD"),
    ("lang", ""),
])
def test_load_config_rejects_invalid_values(field, value):
    """Out-of-range values raise a ValueError (pydantic ValidationError)."""
    with pytest.raises(ValueError):
        load_config(overrides={field: value})
