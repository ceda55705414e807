# menuscan/ingredients.py
from __future__ import annotations

from typing import List, Sequence

from menuscan.lexicon import COMMON_INGREDIENTS


def extract_ingredients(
    description: str,
    vocabulary: Sequence[str] = COMMON_INGREDIENTS,
) -> List[str]:
    """
    Return vocabulary terms found in the description, in vocabulary order.

    Plain substring test: no stemming and no word boundaries, so "creamy"
    counts as "cream" and "tomatoes" as "tomato".
    """
    lower = (description or "").lower()
    return [term for term in vocabulary if term in lower]
