# menuscan/image_prompt.py
"""
Image prompt composition.

Builds one stable descriptive sentence per dish. The sentence drives
keyword-based photo selection in image_ref.py; it is also what a real
image generator would be sent, so it reads like a photography brief.
"""

from __future__ import annotations

import re
from typing import Dict, Sequence

from menuscan.lexicon import APPETIZERS, CUISINE_FALLBACK, DESSERTS, MAIN_COURSES

PROMPT_BASE = "A professional restaurant photograph of {name}"

CATEGORY_CLAUSES: Dict[str, str] = {
    APPETIZERS: ", served as an elegant appetizer",
    MAIN_COURSES: ", served as a main course dish",
    DESSERTS: ", served as a beautiful dessert",
}

PHOTO_CLOSING_CLAUSE = (
    ". Professional food photography, appetizing presentation, "
    "served on elegant restaurant dinnerware, perfect lighting, high quality image"
)

MAX_PROMPT_INGREDIENTS = 3

# A price and whatever trails it is never part of the name.
_PRICE_TAIL_RE = re.compile(r"\$\d+.*")


def clean_dish_name(name: str) -> str:
    return _PRICE_TAIL_RE.sub("", name or "").strip()


def generate_image_prompt(
    name: str,
    description: str,
    category: str,
    cuisine_type: str,
    ingredients: Sequence[str],
) -> str:
    clean_name = clean_dish_name(name)
    prompt = PROMPT_BASE.format(name=clean_name)

    prompt += CATEGORY_CLAUSES.get(category, "")

    if description and description.strip() != clean_name:
        prompt += f". {description}"

    if ingredients:
        prompt += f". Made with {', '.join(list(ingredients)[:MAX_PROMPT_INGREDIENTS])}"

    if cuisine_type and cuisine_type != CUISINE_FALLBACK:
        prompt += f". {cuisine_type.capitalize()} cuisine style"

    return prompt + PHOTO_CLOSING_CLAUSE
