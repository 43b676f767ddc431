from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Article:
    title: str
    url: str
    source: str
    description: str = ""

    @classmethod
    def from_provider(cls, item: Mapping[str, Any]) -> "Article":
        """Build an Article from one entry of the news provider's ``articles`` list."""
        source = item.get("source") or {}
        source_name = source.get("name") if isinstance(source, Mapping) else source
        return cls(
            title=str(item.get("title") or "").strip(),
            url=str(item.get("url") or "").strip(),
            source=str(source_name or "").strip(),
            description=str(item.get("description") or ""),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Article":
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            source=data.get("source") or "",
            description=data.get("description") or "",
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "description": self.description,
        }
