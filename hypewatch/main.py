"""Application entrypoint for AI Hype-Watch.

This script orchestrates the high-level flow:
1) load configuration
2) scout and analyze articles
3) write the HTML report
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from dotenv import load_dotenv

from .fetchers import NewsAPIClient, Scout
from .orchestrator import Orchestrator
from .processors import Gatekeeper, Investigator
from .processors.ai import create_llm_client
from .storage import CacheStore
from .utils.config_loader import ConfigError, MissingSettingsError, Settings, load_settings
from .utils.logging import configure_logging, get_logger
from .utils.rate_limiter import RequestPacer


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="AI Hype-Watch: find AI business news and flag commercial bias"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with pipeline settings (topic, limits, directories)",
    )
    parser.add_argument(
        "--topic",
        default=None,
        help="News search topic (overrides HYPEWATCH_TOPIC and the config file)",
    )
    parser.add_argument(
        "--max-articles",
        type=int,
        default=None,
        help="Number of relevant articles to collect (overrides NEWS_MAX_REQUESTS)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def build_orchestrator(settings: Settings) -> Orchestrator:
    cache = CacheStore(settings.cache_dir)
    llm = create_llm_client(settings)
    scout = Scout(
        NewsAPIClient(settings.news_api_key, url=settings.news_api_url),
        Gatekeeper(llm),
        cache,
        page_size=settings.page_size,
        max_pages=settings.max_pages,
        lookback_days=settings.lookback_days,
        cache_ttl_seconds=settings.cache_ttl_seconds,
    )
    return Orchestrator(
        scout=scout,
        investigator=Investigator(llm, cache),
        pacer=RequestPacer(settings.delay_ms),
        reports_dir=settings.reports_dir,
        max_articles=settings.max_articles,
        lookback_days=settings.lookback_days,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("hw.agent")

    try:
        settings = load_settings(config_path=args.config)
    except MissingSettingsError as exc:
        logger.error("Missing required environment variables: %s", ", ".join(exc.missing))
        return 1
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if args.topic:
        settings.topic = args.topic
    if args.max_articles is not None:
        if args.max_articles <= 0:
            logger.error("--max-articles must be positive, got %d", args.max_articles)
            return 1
        settings.max_articles = args.max_articles

    outcome = build_orchestrator(settings).run(settings.topic)
    if outcome.report_path is not None:
        logger.info("Report: %s", outcome.report_path)
    return outcome.exit_code


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
