# menuscan/cuisine_detect.py
"""
Cuisine detection from keyword density.

The label only flavors the image prompt ("Italian cuisine style"), so a
cheap substring count is enough. Tie-break is first-match-wins over the
CUISINE_KEYWORDS table order.
"""

from __future__ import annotations

from typing import Sequence

from menuscan.contracts import ensure_text
from menuscan.lexicon import (
    CUISINE_FALLBACK,
    CUISINE_KEYWORDS,
    CUISINE_MATCH_THRESHOLD,
    Rule,
)


def _keyword_hits(text: str, keywords: Sequence[str]) -> int:
    return sum(1 for kw in keywords if kw in text)


def detect_cuisine_type(
    menu_text: str,
    table: Sequence[Rule] = CUISINE_KEYWORDS,
    threshold: int = CUISINE_MATCH_THRESHOLD,
) -> str:
    """
    Return the first cuisine in `table` whose keywords appear at least
    `threshold` times in the text, else "international".
    """
    lower = ensure_text(menu_text).lower()
    for cuisine, keywords in table:
        if _keyword_hits(lower, keywords) >= threshold:
            return cuisine
    return CUISINE_FALLBACK
