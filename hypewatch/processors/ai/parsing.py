from __future__ import annotations

import json
from typing import Any, Dict


def parse_json_object(raw: str | None) -> Dict[str, Any]:
    """Parse a JSON-mode completion into a dict.

    An empty completion is treated as ``{}``. Text that is not JSON, or JSON
    that is not an object, raises ``ValueError``.
    """
    text = (raw or "").strip() or "{}"
    obj = json.loads(text)
    if not isinstance(obj, dict):
        raise ValueError(f"Expected a JSON object, got {type(obj).__name__}")
    return obj
