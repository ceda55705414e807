"""
Dish browsing helpers: category tabs, search filter, grouping, image regeneration.

Covers:
  - dish_categories(): "All" + first-seen order, no duplicates
  - filter_dishes(): category filter, case-insensitive name/description search, both
  - group_by_category(): grouping keeps input order, empty groups on request
  - regenerate_dish_image(): new image only, prompt carried, input untouched
  - Dish.from_dict(): validation, defaults, inferred category + image

Run: python -m pytest tests/test_menu_browse.py -v
"""

import os
import sys
from urllib.parse import parse_qs, urlparse

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from menuscan.contracts import MenuInputError
from menuscan.lexicon import FOOD_IMAGE_IDS
from menuscan.menu_browse import (
    ALL_CATEGORIES,
    dish_categories,
    filter_dishes,
    group_by_category,
    regenerate_dish_image,
)
from menuscan.menu_types import Dish

IMAGE_IDS = dict(FOOD_IMAGE_IDS)


def _dish(i, name, category, description=None, ingredients=()):
    return Dish(
        id=f"t-0-{i}",
        name=name,
        description=description or name,
        price="$10",
        category=category,
        ingredients=tuple(ingredients),
        image="https://example.invalid/old.jpg",
    )


@pytest.fixture()
def dishes():
    return [
        _dish(0, "Bruschetta", "Appetizers", "Grilled bread, tomato, basil", ["tomato", "basil"]),
        _dish(1, "Grilled Salmon", "Main Courses", "Salmon with lemon butter", ["salmon", "butter", "lemon"]),
        _dish(2, "Calamari", "Appetizers", "Fried squid, lemon aioli", ["lemon"]),
        _dish(3, "Tiramisu", "Desserts", "Espresso, mascarpone"),
        _dish(4, "Chicken Parmesan", "Main Courses", "Breaded chicken, mozzarella", ["chicken", "mozzarella"]),
    ]


class TestCategories:

    def test_all_first_then_first_seen(self, dishes):
        assert dish_categories(dishes) == [ALL_CATEGORIES, "Appetizers", "Main Courses", "Desserts"]

    def test_empty(self):
        assert dish_categories([]) == [ALL_CATEGORIES]


class TestFilter:

    def test_all_returns_everything(self, dishes):
        assert filter_dishes(dishes) == dishes
        assert filter_dishes(dishes, "All", "") == dishes

    def test_category(self, dishes):
        names = [d.name for d in filter_dishes(dishes, "Appetizers")]
        assert names == ["Bruschetta", "Calamari"]

    def test_search_name_case_insensitive(self, dishes):
        assert [d.name for d in filter_dishes(dishes, search="SALMON")] == ["Grilled Salmon"]

    def test_search_description(self, dishes):
        names = [d.name for d in filter_dishes(dishes, search="lemon")]
        assert names == ["Grilled Salmon", "Calamari"]

    def test_category_and_search(self, dishes):
        names = [d.name for d in filter_dishes(dishes, "Appetizers", "lemon")]
        assert names == ["Calamari"]

    def test_no_match(self, dishes):
        assert filter_dishes(dishes, "Beverages") == []
        assert filter_dishes(dishes, search="pho") == []

    def test_none_means_no_filter(self, dishes):
        assert filter_dishes(dishes, None, None) == dishes


class TestGrouping:

    def test_grouped_keeps_order(self, dishes):
        grouped = group_by_category(dishes)
        assert list(grouped) == ["Appetizers", "Main Courses", "Desserts"]
        assert [d.name for d in grouped["Main Courses"]] == ["Grilled Salmon", "Chicken Parmesan"]

    def test_grouping_filtered_list(self, dishes):
        grouped = group_by_category(filter_dishes(dishes, search="lemon"))
        assert {k: len(v) for k, v in grouped.items()} == {"Main Courses": 1, "Appetizers": 1}

    def test_full_category_list_keeps_empty_groups(self, dishes):
        categories = dish_categories(dishes)[1:]
        grouped = group_by_category(filter_dishes(dishes, search="lemon"), categories)
        assert list(grouped) == ["Appetizers", "Main Courses", "Desserts"]
        assert grouped["Desserts"] == []


class TestRegenerate:

    def test_only_image_changes(self, dishes):
        salmon = dishes[1]
        fresh = regenerate_dish_image(salmon, "scan-9", freshness="r1")
        assert fresh.image != salmon.image
        assert (fresh.id, fresh.name, fresh.description, fresh.price, fresh.category, fresh.ingredients) == \
               (salmon.id, salmon.name, salmon.description, salmon.price, salmon.category, salmon.ingredients)
        assert salmon.image == "https://example.invalid/old.jpg"

    def test_url_carries_session_and_prompt(self, dishes):
        fresh = regenerate_dish_image(dishes[1], "scan-9", freshness="r1")
        assert IMAGE_IDS["salmon"] in fresh.image
        q = parse_qs(urlparse(fresh.image).query)
        assert q["sid"] == ["scan-9"]
        assert q["v"] == ["r1"]
        assert q["prompt"][0].startswith("A professional restaurant photograph of Grilled Salmon")

    def test_cuisine_from_dish_text(self):
        dish = _dish(0, "Spicy Tuna Roll", "Main Courses", "Sushi rice, tuna, teriyaki glaze")
        fresh = regenerate_dish_image(dish, "s")
        prompt = parse_qs(urlparse(fresh.image).query)["prompt"][0]
        assert "Asian cuisine style" in prompt

    def test_each_call_is_fresh(self, dishes):
        a = regenerate_dish_image(dishes[0], "s")
        b = regenerate_dish_image(dishes[0], "s")
        assert a.image != b.image


class TestDishFromDict:

    def test_round_trip(self, dishes):
        for d in dishes:
            assert Dish.from_dict(d.to_dict()) == d

    def test_defaults(self):
        dish = Dish.from_dict({"name": "  Gelato "})
        assert dish.name == "Gelato"
        assert dish.description == "Gelato"
        assert dish.price == ""
        assert dish.ingredients == ()
        assert dish.category == "Main Courses"
        assert dish.image

    def test_missing_category_inferred(self):
        dish = Dish.from_dict({"name": "Tomato Soup", "description": "Roasted tomato"})
        assert dish.category == "Soups"

    def test_missing_image_resolved_with_id(self):
        dish = Dish.from_dict({"id": "scan-3-0-1", "name": "Caesar Salad", "image": ""})
        assert IMAGE_IDS["salad"] in dish.image
        assert parse_qs(urlparse(dish.image).query)["sid"] == ["scan-3-0-1"]

    def test_unknown_category_rejected(self):
        with pytest.raises(MenuInputError):
            Dish.from_dict({"name": "Soup", "category": "Breakfast"})

    @pytest.mark.parametrize("payload", [
        {"name": ""},
        {"description": "no name"},
        {"name": "x", "ingredients": "salmon"},
        {"name": 5},
        "not a dict",
    ])
    def test_invalid(self, payload):
        with pytest.raises(MenuInputError):
            Dish.from_dict(payload)
