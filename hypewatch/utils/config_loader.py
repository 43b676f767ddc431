from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlparse

import yaml


class ConfigError(Exception):
    """Raised when the configuration is invalid or missing required fields."""


class MissingSettingsError(ConfigError):
    """Raised when required environment settings are absent."""

    def __init__(self, missing: List[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing)}")


REQUIRED_ENV = ("LLM_API_KEY", "LLM_BASE_URL", "LLM_MODEL", "NEWS_API_KEY")

DEFAULT_TOPIC = "AI business use cases"
DEFAULT_NEWS_API_URL = "https://newsapi.org/v2/everything"

# Optional environment knobs mapped onto Settings fields.
_ENV_INT_FIELDS = {
    "NEWS_MAX_REQUESTS": "max_articles",
    "NEWS_BATCH_SIZE": "page_size",
    "RESPECT_RPM": "delay_ms",
}
_ENV_STR_FIELDS = {
    "NEWS_API_URL": "news_api_url",
    "HYPEWATCH_TOPIC": "topic",
}
_ENV_PATH_FIELDS = {
    "HYPEWATCH_CACHE_DIR": "cache_dir",
    "HYPEWATCH_REPORTS_DIR": "reports_dir",
}

# Keys accepted under the ``pipeline`` mapping of the YAML file.
_YAML_INT_FIELDS = {"max_articles", "page_size", "delay_ms", "max_pages", "lookback_days", "cache_ttl_hours"}
_YAML_STR_FIELDS = {"topic", "news_api_url"}
_YAML_PATH_FIELDS = {"cache_dir", "reports_dir"}
_ZERO_ALLOWED = {"delay_ms"}


@dataclass(slots=True)
class Settings:
    llm_api_key: str
    llm_base_url: str
    llm_model: str
    news_api_key: str
    topic: str = DEFAULT_TOPIC
    max_articles: int = 5
    page_size: int = 20
    delay_ms: int = 4500
    max_pages: int = 3
    lookback_days: int = 7
    cache_ttl_hours: int = 24
    news_api_url: str = DEFAULT_NEWS_API_URL
    cache_dir: Path = field(default_factory=lambda: Path("cache"))
    reports_dir: Path = field(default_factory=lambda: Path("reports"))

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_hours * 3600.0


def _parse_int(name: str, raw: Any, *, attr: Optional[str] = None) -> int:
    if isinstance(raw, bool):
        raise ConfigError(f"'{name}' must be an integer, got {raw!r}")
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ConfigError(f"'{name}' must be an integer, got {raw!r}") from None
    if value < 0 or (value == 0 and (attr or name) not in _ZERO_ALLOWED):
        raise ConfigError(f"'{name}' must be positive, got {value}")
    return value


def _validate_url(name: str, url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid URL '{url}' for {name}. Must be absolute http(s) URL.")
    return url


def _load_yaml_overrides(path: Path | str) -> Dict[str, Any]:
    """Read the ``pipeline`` mapping of a YAML config file into Settings fields.

    YAML structure:
      - Top-level mapping
      - Key ``pipeline``: mapping with any of
          topic, news_api_url: string
          max_articles, page_size, max_pages, lookback_days, cache_ttl_hours: positive int
          delay_ms: non-negative int
          cache_dir, reports_dir: path

    Secrets are never read from YAML; unknown keys under ``pipeline`` are rejected.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML configuration must be a mapping")

    pipeline = data.get("pipeline") or {}
    if not isinstance(pipeline, dict):
        raise ConfigError("'pipeline' must be a mapping in the YAML configuration")

    known = _YAML_INT_FIELDS | _YAML_STR_FIELDS | _YAML_PATH_FIELDS
    unknown = sorted(set(map(str, pipeline)) - known)
    if unknown:
        raise ConfigError(f"Unknown pipeline keys: {unknown}. Allowed: {sorted(known)}")

    overrides: Dict[str, Any] = {}
    for key, raw in pipeline.items():
        if raw is None:
            continue
        if key in _YAML_INT_FIELDS:
            overrides[key] = _parse_int(key, raw)
        elif key in _YAML_PATH_FIELDS:
            overrides[key] = Path(str(raw))
        else:
            value = str(raw).strip()
            if not value:
                raise ConfigError(f"'{key}' must not be empty")
            overrides[key] = value
    return overrides


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for name, attr in _ENV_INT_FIELDS.items():
        if env.get(name):
            overrides[attr] = _parse_int(name, env[name], attr=attr)
    for name, attr in _ENV_STR_FIELDS.items():
        if env.get(name):
            overrides[attr] = env[name].strip()
    for name, attr in _ENV_PATH_FIELDS.items():
        if env.get(name):
            overrides[attr] = Path(env[name])
    return overrides


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    *,
    config_path: Path | str | None = None,
) -> Settings:
    """Build ``Settings`` from the environment and an optional YAML file.

    Precedence: environment > YAML > defaults. All missing required
    variables are reported together via ``MissingSettingsError``.
    """
    env = os.environ if env is None else env

    missing = [name for name in REQUIRED_ENV if not (env.get(name) or "").strip()]
    if missing:
        raise MissingSettingsError(missing)

    settings = Settings(
        llm_api_key=env["LLM_API_KEY"].strip(),
        llm_base_url=_validate_url("LLM_BASE_URL", env["LLM_BASE_URL"].strip()),
        llm_model=env["LLM_MODEL"].strip(),
        news_api_key=env["NEWS_API_KEY"].strip(),
    )

    overrides: Dict[str, Any] = {}
    if config_path is not None:
        overrides.update(_load_yaml_overrides(config_path))
    overrides.update(_env_overrides(env))
    settings = replace(settings, **overrides)
    _validate_url("news_api_url", settings.news_api_url)
    return settings
