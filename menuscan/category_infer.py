"""
menuscan/category_infer.py

Category assignment for parsed dish lines.

Goals:
- Section title is the strongest signal ("DESSERTS" says it all).
- Item text is a fallback for vague headers ("House Favorites").
- Always land on one of the six menu categories.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from menuscan.lexicon import (
    DEFAULT_CATEGORY,
    ITEM_CATEGORY_RULES,
    SECTION_CATEGORY_RULES,
    Rule,
)


# ------------------------
# Data structures
# ------------------------

@dataclass(frozen=True)
class CategoryGuess:
    category: str
    source: str  # "section" | "item" | "default"
    keyword: str = ""


# ------------------------
# Rule matching
# ------------------------

def _first_rule_hit(text: str, rules: Sequence[Rule]) -> Optional[Tuple[str, str]]:
    """Return (category, keyword) of the first rule whose keyword is in text."""
    if not text:
        return None
    for category, keywords in rules:
        for kw in keywords:
            if kw in text:
                return category, kw
    return None


# ------------------------
# Core inference
# ------------------------

def infer_category(
    item_text: Optional[str],
    section_title: Optional[str],
    section_rules: Sequence[Rule] = SECTION_CATEGORY_RULES,
    item_rules: Sequence[Rule] = ITEM_CATEGORY_RULES,
    fallback: str = DEFAULT_CATEGORY,
) -> CategoryGuess:
    """
    Infer a category from the owning section title, then the item text.

    Returns a CategoryGuess recording which stage decided and on what
    keyword, so callers can show why a dish landed where it did.
    """
    hit = _first_rule_hit((section_title or "").lower(), section_rules)
    if hit:
        return CategoryGuess(category=hit[0], source="section", keyword=hit[1])

    hit = _first_rule_hit((item_text or "").lower(), item_rules)
    if hit:
        return CategoryGuess(category=hit[0], source="item", keyword=hit[1])

    return CategoryGuess(category=fallback, source="default")


def categorize_item(item_text: Optional[str], section_title: Optional[str]) -> str:
    return infer_category(item_text, section_title).category
