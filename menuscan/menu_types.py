"""
MenuScan Types

Plain immutable records shared by the parser, the browse helpers and the
portal:
- MenuSection: a detected header plus the raw candidate dish lines under it.
- Dish: the structured record emitted for every candidate line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from menuscan.category_infer import categorize_item
from menuscan.contracts import MenuInputError, validate_dish_payload
from menuscan.cuisine_detect import detect_cuisine_type
from menuscan.image_prompt import generate_image_prompt
from menuscan.image_ref import generate_image_url


@dataclass(frozen=True)
class MenuSection:
    title: str
    dishes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Dish:
    id: str
    name: str
    description: str
    price: str
    category: str
    ingredients: Tuple[str, ...] = field(default_factory=tuple)
    image: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "ingredients": list(self.ingredients),
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Dish":
        """
        Rebuild a Dish from its to_dict() shape (e.g. a portal request body).

        A missing category is inferred from the dish text and a missing image
        is resolved the same way the parser resolves one, keyed on the id.
        """
        ok, err = validate_dish_payload(payload)
        if not ok:
            raise MenuInputError(err)
        name = payload["name"].strip()
        description = (payload.get("description") or "").strip() or name
        ingredients = tuple(payload.get("ingredients") or ())
        category = payload.get("category") or categorize_item(f"{name} {description}", "")
        image = payload.get("image") or ""
        if not image:
            cuisine = detect_cuisine_type(f"{name} {description}")
            prompt = generate_image_prompt(name, description, category, cuisine, ingredients)
            image = generate_image_url(prompt, payload.get("id") or "")
        return cls(
            id=payload.get("id") or "",
            name=name,
            description=description,
            price=payload.get("price") or "",
            category=category,
            ingredients=ingredients,
            image=image,
        )
