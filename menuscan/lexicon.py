# menuscan/lexicon.py
"""
Shared Menu Lexicon

Single source of truth for every keyword table the text pipeline reads:
  - CUISINE_KEYWORDS: cuisine label -> keywords (first cuisine with 2+ hits wins)
  - SECTION_HEADERS: substrings that mark a line as a section header
  - SECTION_CATEGORY_RULES: section title keywords -> dish category
  - ITEM_CATEGORY_RULES: fallback item-text keywords -> dish category
  - COMMON_INGREDIENTS: ingredient vocabulary for description tagging
  - FOOD_TERMS / FOOD_IMAGE_IDS: food keywords -> stock photo ids

Tables are ordered tuples of (label, keywords) pairs rather than dicts so the
scan order is explicit; several lookups are first-match-wins.
"""

from __future__ import annotations

from typing import Tuple


Rule = Tuple[str, Tuple[str, ...]]


# ── Categories ───────────────────────────────────────

APPETIZERS = "Appetizers"
SALADS = "Salads"
SOUPS = "Soups"
MAIN_COURSES = "Main Courses"
DESSERTS = "Desserts"
BEVERAGES = "Beverages"

CATEGORIES: Tuple[str, ...] = (
    APPETIZERS, SALADS, SOUPS, MAIN_COURSES, DESSERTS, BEVERAGES,
)

DEFAULT_CATEGORY = MAIN_COURSES


# ── Cuisines ─────────────────────────────────────────

CUISINE_FALLBACK = "international"

# Order matters: detect_cuisine_type() returns the FIRST cuisine reaching the
# match threshold, not the best one.
CUISINE_KEYWORDS: Tuple[Rule, ...] = (
    ("italian", ("pasta", "pizza", "risotto", "bruschetta", "tiramisu", "parmesan")),
    ("asian", ("sushi", "ramen", "pad thai", "teriyaki", "tempura", "kimchi")),
    ("mexican", ("tacos", "burrito", "quesadilla", "salsa", "guacamole", "enchilada")),
    ("american", ("burger", "fries", "bbq", "wings", "sandwich", "steak")),
    ("mediterranean", ("hummus", "falafel", "tzatziki", "kebab", "olive", "pita")),
    ("french", ("croissant", "baguette", "coq au vin", "ratatouille", "crepe")),
    ("seafood", ("salmon", "lobster", "shrimp", "scallops", "crab", "tuna")),
)

CUISINE_MATCH_THRESHOLD = 2

CUISINE_TYPES: Tuple[str, ...] = tuple(c for c, _ in CUISINE_KEYWORDS) + (CUISINE_FALLBACK,)


# ── Section headers ──────────────────────────────────

SECTION_HEADERS: Tuple[str, ...] = (
    "appetizers", "starters", "apps",
    "salads", "soups",
    "main courses", "mains", "entrees", "pasta", "seafood", "meat",
    "desserts", "sweets",
    "beverages", "drinks", "cocktails", "wine",
)

# Lines this short (or shorter) are OCR noise, not dishes.
MIN_DISH_LINE_CHARS = 4


# ── Category rules ───────────────────────────────────

# Matched against the lowercased section title, first rule wins.
SECTION_CATEGORY_RULES: Tuple[Rule, ...] = (
    (APPETIZERS, ("appetizer", "starter", "apps")),
    (SALADS, ("salad",)),
    (SOUPS, ("soup",)),
    (MAIN_COURSES, ("main", "entree", "pasta", "seafood", "meat")),
    (DESSERTS, ("dessert", "sweet")),
    (BEVERAGES, ("drink", "beverage", "cocktail")),
)

# Used only when the section title says nothing useful.
ITEM_CATEGORY_RULES: Tuple[Rule, ...] = (
    (SALADS, ("salad",)),
    (SOUPS, ("soup",)),
    (DESSERTS, ("cake", "ice cream", "dessert")),
)


# ── Ingredients ──────────────────────────────────────

COMMON_INGREDIENTS: Tuple[str, ...] = (
    # proteins
    "chicken", "beef", "pork", "salmon", "tuna", "shrimp", "lobster",
    # produce
    "tomato", "onion", "garlic", "mushroom", "spinach", "arugula",
    # dairy
    "mozzarella", "parmesan", "cheddar", "feta",
    # pantry / herbs
    "olive oil", "butter", "cream", "lemon", "basil", "oregano",
)


# ── Food terms -> stock photos ───────────────────────

# Priority order: the first term found in a prompt picks the photo.
FOOD_TERMS: Tuple[str, ...] = (
    "salmon", "chicken", "beef", "pasta", "pizza", "salad", "soup", "burger",
    "sandwich", "seafood", "vegetables", "dessert", "cake", "ice cream",
    "bread", "cheese", "fish", "meat", "rice", "noodles",
)

FOOD_IMAGE_IDS: Tuple[Tuple[str, str], ...] = (
    ("salmon", "1485963631004-f2f00b1d6606"),
    ("chicken", "1532550907401-a500c197c2b8"),
    ("beef", "1546833999-b9fcbecd74dd"),
    ("pasta", "1551782073-85ceef016ec2"),
    ("pizza", "1565299624946-b28f40a0ca4b"),
    ("salad", "1567620905732-2d1ec7ab7445"),
    ("soup", "1547592180-85f173990554"),
    ("burger", "1571091718767-18b5b1457add"),
    ("seafood", "1559181567-c3229490224f"),
    ("vegetables", "1540420773983-0e83dc30bb86"),
    ("dessert", "1551024506-0bccd0e65793"),
    ("cake", "1578985545622-7c14a934b83b"),
    ("bread", "1509440159596-0249088772ff"),
    ("cheese", "1486297678162-ce23ef5fe92d"),
    ("fish", "1544551763-46a013bb70d5"),
    ("meat", "1529193591184-b1d58069ecdd"),
    ("rice", "1536303047130-63d69c1dd4d4"),
    ("noodles", "1555949258-eb67b1ef6cce"),
)

# Generic plated-food photo used when no food term matches.
DEFAULT_IMAGE_ID = "1565299624946-b28f40a0ca4b"

IMAGE_URL_TEMPLATE = (
    "https://images.unsplash.com/photo-{image_id}"
    "?w=400&h=300&fit=crop&crop=center&q=80&auto=format"
)
