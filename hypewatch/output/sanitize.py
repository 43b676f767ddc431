from __future__ import annotations

import re

import markdown as md
from bs4 import BeautifulSoup

# Line breaks kept as <br>, GitHub-style tables and fenced code.
_MARKDOWN_EXTENSIONS = ["nl2br", "tables", "fenced_code", "sane_lists"]

_js_scheme_re = re.compile(r"^\s*javascript\s*:", re.IGNORECASE)
_control_re = re.compile(r"[\x00-\x20]+")


def _is_javascript_uri(value: str) -> bool:
    # Browsers ignore embedded whitespace/control chars inside the scheme
    return bool(_js_scheme_re.match(_control_re.sub("", value)))


def sanitize_html(html: str) -> str:
    """Strip script elements, inline event handlers and ``javascript:`` URIs."""
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all("script"):
        tag.decompose()
    for tag in soup.find_all(True):
        for attr in list(tag.attrs):
            value = tag.attrs[attr]
            if isinstance(value, list):
                value = " ".join(value)
            if attr.lower().startswith("on") or _is_javascript_uri(str(value)):
                del tag.attrs[attr]
    return str(soup)


def markdown_to_safe_html(text: str | None) -> str:
    """Render model-written markdown to HTML and sanitize the result."""
    if not text:
        return ""
    rendered = md.markdown(text, extensions=_MARKDOWN_EXTENSIONS)
    return sanitize_html(rendered)
