# menuscan/menu_browse.py
"""
Browse helpers for a parsed dish list: category tabs, search filter,
grouping, and on-demand image regeneration.

Non-destructive: every function returns new lists / dishes and never
mutates its input.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from menuscan.cuisine_detect import detect_cuisine_type
from menuscan.image_prompt import generate_image_prompt
from menuscan.image_ref import build_image_url, select_image_id
from menuscan.menu_types import Dish

log = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


def dish_categories(dishes: Iterable[Dish]) -> List[str]:
    """'All' followed by each category in first-seen order."""
    seen: List[str] = []
    for d in dishes:
        if d.category not in seen:
            seen.append(d.category)
    return [ALL_CATEGORIES] + seen


def _matches_search(dish: Dish, needle: str) -> bool:
    return needle in dish.name.lower() or needle in dish.description.lower()


def filter_dishes(
    dishes: Iterable[Dish],
    category: Optional[str] = ALL_CATEGORIES,
    search: Optional[str] = "",
) -> List[Dish]:
    """
    Keep dishes in `category` (or any, for "All"/empty) whose name or
    description contains `search`, case-insensitively.
    """
    needle = (search or "").lower()
    out: List[Dish] = []
    for d in dishes:
        if category and category != ALL_CATEGORIES and d.category != category:
            continue
        if needle and not _matches_search(d, needle):
            continue
        out.append(d)
    return out


def group_by_category(
    dishes: Iterable[Dish],
    categories: Optional[Sequence[str]] = None,
) -> Dict[str, List[Dish]]:
    """
    Group dishes under each category, in order.

    Pass the full menu's categories when grouping a filtered list so that
    categories with no remaining dishes still show up as empty groups.
    """
    dishes = list(dishes)
    if categories is None:
        categories = dish_categories(dishes)[1:]
    grouped: Dict[str, List[Dish]] = {}
    for category in categories:
        grouped[category] = [d for d in dishes if d.category == category]
    return grouped


def regenerate_dish_image(dish: Dish, session_id: str, freshness: Optional[str] = None) -> Dish:
    """
    Return a copy of `dish` with a freshly resolved image reference.

    Cuisine is re-detected from the dish's own text (the full menu is no
    longer around), and the composed prompt travels with the URL.
    """
    cuisine = detect_cuisine_type(f"{dish.name} {dish.description}")
    prompt = generate_image_prompt(
        dish.name, dish.description, dish.category, cuisine, dish.ingredients,
    )
    image = build_image_url(select_image_id(prompt), session_id, freshness, prompt=prompt)
    log.debug("Regenerated image for %s: %s", dish.id or dish.name, image)
    return replace(dish, image=image)
