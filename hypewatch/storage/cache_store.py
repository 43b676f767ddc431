from __future__ import annotations

import json
import os
import re
import tempfile
import time
from pathlib import Path
from typing import Any, Optional

from ..utils.logging import get_logger

logger = get_logger("hw.storage.cache")

ARTICLES = "articles"
ANALYSIS = "analysis"

_FILE_PREFIX = {ARTICLES: "", ANALYSIS: "analysis_"}
_whitespace_re = re.compile(r"\s+")
_unsafe_re = re.compile(r"[^A-Za-z0-9_.-]")


def topic_cache_key(topic: str) -> str:
    """File-safe cache key for a topic: whitespace runs become underscores."""
    key = _whitespace_re.sub("_", topic.strip())
    return _unsafe_re.sub("", key) or "_"


class CacheStore:
    """JSON file-backed key-value store with two namespaces.

    Files live flat under ``base_dir``: ``<key>.json`` for article lists and
    ``analysis_<key>.json`` for analyses. Values are overwritten whole and
    each write lands atomically via a temporary file and ``os.replace``.
    """

    def __init__(self, base_dir: str | Path = "cache") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, namespace: str, key: str) -> Path:
        try:
            prefix = _FILE_PREFIX[namespace]
        except KeyError:
            raise ValueError(f"Unknown cache namespace '{namespace}'") from None
        return self.base_dir / f"{prefix}{key}.json"

    def get(
        self,
        namespace: str,
        key: str,
        *,
        max_age: Optional[float] = None,
        min_count: Optional[int] = None,
    ) -> Any:
        """Return the cached value, or ``None`` when absent, expired, undersized or unreadable.

        ``max_age`` is in seconds and compared with the file's mtime.
        ``min_count`` applies to list values only.
        """
        path = self.path_for(namespace, key)
        if not path.exists():
            return None

        if max_age is not None:
            age = time.time() - path.stat().st_mtime
            if age >= max_age:
                logger.debug("Cache entry expired (%.0fs old): %s", age, path)
                return None

        try:
            value = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable cache file %s: %s", path, exc)
            return None

        if min_count is not None:
            if not isinstance(value, list) or len(value) < min_count:
                return None
        return value

    def put(self, namespace: str, key: str, value: Any) -> Path:
        path = self.path_for(namespace, key)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=".tmp", dir=self.base_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote cache entry %s", path)
        return path
