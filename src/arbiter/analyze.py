from __future__ import annotations

import re

from bs4 import BeautifulSoup


STYLE_BLOCK_RE = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.I)
SCRIPT_BLOCK_RE = re.compile(r"<script[^>]*>([\s\S]*?)</script>", re.I)

# Case-sensitive on purpose: STYLE= in legacy markup is not counted.
INLINE_STYLE_PATTERN = r"""style=["'][^"']*["']"""


class RegexMatcher:
    """
    Text-search backend for the scoring rules.

    Anything with the same `search` / `count` methods can stand in for it.
    """

    def __init__(self, flags: int = re.IGNORECASE):
        self.flags = flags
        self._cache: dict[tuple[str, int], re.Pattern[str]] = {}

    def _compile(self, pattern: str, flags: int) -> re.Pattern[str]:
        key = (pattern, flags)
        compiled = self._cache.get(key)
        if compiled is None:
            compiled = re.compile(pattern, flags)
            self._cache[key] = compiled
        return compiled

    def search(self, pattern: str, text: str) -> bool:
        return self._compile(pattern, self.flags).search(text) is not None

    def count(self, pattern: str, text: str, flags: int | None = None) -> int:
        use_flags = self.flags if flags is None else flags
        return sum(1 for _ in self._compile(pattern, use_flags).finditer(text))


def _first_block(regex: re.Pattern[str], html: str) -> str:
    m = regex.search(html)
    if not m:
        return ""
    return m.group(1) or ""


def extract_style_block(html: str) -> str:
    return _first_block(STYLE_BLOCK_RE, html)


def extract_script_block(html: str) -> str:
    return _first_block(SCRIPT_BLOCK_RE, html)


def count_inline_styles(html: str) -> int:
    return len(re.findall(INLINE_STYLE_PATTERN, html))


def extract_title(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    if soup.title and soup.title.string:
        return " ".join(soup.title.string.split()).strip()
    return None
