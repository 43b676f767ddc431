"""Tests for settings loading from the environment and YAML."""

from pathlib import Path

import pytest

from hypewatch.utils.config_loader import ConfigError, MissingSettingsError, load_settings

BASE_ENV = {
    "LLM_API_KEY": "sk-test",
    "LLM_BASE_URL": "https://llm.example.com/v1",
    "LLM_MODEL": "gpt-test",
    "NEWS_API_KEY": "news-test",
}


def env(**extra):
    return {**BASE_ENV, **extra}


class TestRequiredSettings:
    def test_all_missing_names_listed(self):
        with pytest.raises(MissingSettingsError) as info:
            load_settings({"LLM_MODEL": "x"})
        assert info.value.missing == ["LLM_API_KEY", "LLM_BASE_URL", "NEWS_API_KEY"]
        assert "LLM_API_KEY, LLM_BASE_URL, NEWS_API_KEY" in str(info.value)

    def test_blank_value_counts_as_missing(self):
        with pytest.raises(MissingSettingsError) as info:
            load_settings(env(NEWS_API_KEY="  "))
        assert info.value.missing == ["NEWS_API_KEY"]

    def test_invalid_llm_url(self):
        with pytest.raises(ConfigError):
            load_settings(env(LLM_BASE_URL="llm.example.com"))


class TestDefaultsAndOverrides:
    def test_defaults(self):
        settings = load_settings(env())
        assert settings.max_articles == 5
        assert settings.page_size == 20
        assert settings.delay_ms == 4500
        assert settings.max_pages == 3
        assert settings.lookback_days == 7
        assert settings.cache_ttl_seconds == 24 * 3600
        assert settings.topic == "AI business use cases"
        assert settings.cache_dir == Path("cache")
        assert settings.reports_dir == Path("reports")

    def test_env_overrides(self):
        settings = load_settings(
            env(NEWS_MAX_REQUESTS="10", NEWS_BATCH_SIZE="50", RESPECT_RPM="0", HYPEWATCH_TOPIC="AI in retail")
        )
        assert (settings.max_articles, settings.page_size, settings.delay_ms) == (10, 50, 0)
        assert settings.topic == "AI in retail"

    def test_zero_delay_from_env(self):
        assert load_settings(env(RESPECT_RPM="0")).delay_ms == 0

    def test_negative_delay_from_env_rejected(self):
        with pytest.raises(ConfigError, match="RESPECT_RPM"):
            load_settings(env(RESPECT_RPM="-5"))

    @pytest.mark.parametrize("value", ["ten", "-1", "0"])
    def test_invalid_max_articles(self, value):
        with pytest.raises(ConfigError):
            load_settings(env(NEWS_MAX_REQUESTS=value))


class TestYamlConfig:
    def write(self, tmp_path, text):
        path = tmp_path / "hypewatch.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_yaml_values_applied(self, tmp_path):
        path = self.write(tmp_path, "pipeline:\n  topic: generative AI pricing\n  max_pages: 5\n  reports_dir: out\n")
        settings = load_settings(env(), config_path=path)
        assert settings.topic == "generative AI pricing"
        assert settings.max_pages == 5
        assert settings.reports_dir == Path("out")

    def test_env_beats_yaml(self, tmp_path):
        path = self.write(tmp_path, "pipeline:\n  max_articles: 8\n")
        assert load_settings(env(NEWS_MAX_REQUESTS="2"), config_path=path).max_articles == 2

    def test_unknown_key_rejected(self, tmp_path):
        path = self.write(tmp_path, "pipeline:\n  llm_api_key: leaked\n")
        with pytest.raises(ConfigError):
            load_settings(env(), config_path=path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(env(), config_path=tmp_path / "absent.yaml")

    def test_pipeline_must_be_mapping(self, tmp_path):
        path = self.write(tmp_path, "pipeline:\n  - topic\n")
        with pytest.raises(ConfigError):
            load_settings(env(), config_path=path)

    def test_shipped_config_loads(self):
        shipped = Path(__file__).resolve().parents[1] / "config" / "hypewatch.yaml"
        settings = load_settings(env(), config_path=shipped)
        assert settings.delay_ms == 4500
