# menuscan/menu_parser.py
"""
Menu Parser: raw OCR text -> ordered list of Dish records.

Pipeline (all synchronous, no I/O):
  1. detect_menu_sections()  over the full text
  2. detect_cuisine_type()   over the full text
  3. per section s, per line i:
       parse_dish_line -> categorize_item -> extract_ingredients
       -> generate_image_prompt -> generate_image_url
     emitting Dish(id="<session>-<s>-<i>")

Every candidate line becomes a dish; a line with no price or separator just
yields price "" and name = whole line.

Usage:
    from menuscan.menu_parser import parse_menu_text, new_session_id

    dishes = parse_menu_text(ocr_text, new_session_id())
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
import uuid
from typing import Callable, List, Optional, Tuple

from menuscan.category_infer import categorize_item
from menuscan.contracts import ensure_text
from menuscan.cuisine_detect import detect_cuisine_type
from menuscan.image_prompt import generate_image_prompt
from menuscan.image_ref import generate_image_url
from menuscan.ingredients import extract_ingredients
from menuscan.menu_types import Dish, MenuSection
from menuscan.parsers.dish_line import parse_dish_line
from menuscan.parsers.section_segmenter import detect_menu_sections

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int], None]

# (stage title, percent complete once the stage is done)
PROCESSING_STAGES: Tuple[Tuple[str, int], ...] = (
    ("Scanning Menu", 25),
    ("Identifying Dishes", 50),
    ("Generating Images", 75),
    ("Finalizing Menu", 100),
)


@dataclass(frozen=True)
class MenuParseResult:
    session_id: str
    cuisine: str
    sections: Tuple[MenuSection, ...] = ()
    dishes: Tuple[Dish, ...] = field(default_factory=tuple)


def new_session_id() -> str:
    """Time-based token with a random suffix; unique per scan."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


def dish_id(session_id: str, section_index: int, line_index: int) -> str:
    return f"{session_id}-{section_index}-{line_index}"


def _report(progress: Optional[ProgressCallback], stage_index: int) -> None:
    if progress is None:
        return
    title, percent = PROCESSING_STAGES[stage_index]
    progress(title, percent)


def build_dish(
    line: str,
    section_title: str,
    cuisine: str,
    session_id: str,
    section_index: int,
    line_index: int,
) -> Dish:
    parsed = parse_dish_line(line)
    # category looks at the raw line, ingredients only at the description
    category = categorize_item(line, section_title)
    ingredients = extract_ingredients(parsed.description)

    prompt = generate_image_prompt(parsed.name, parsed.description, category, cuisine, ingredients)
    log.debug("Generated prompt for %s: %s", parsed.name, prompt)
    image = generate_image_url(prompt, session_id)
    log.debug("Generated image URL for %s: %s", parsed.name, image)

    return Dish(
        id=dish_id(session_id, section_index, line_index),
        name=parsed.name,
        description=parsed.description,
        price=parsed.price,
        category=category,
        ingredients=tuple(ingredients),
        image=image,
    )


def parse_menu(
    menu_text: str,
    session_id: str,
    progress: Optional[ProgressCallback] = None,
) -> MenuParseResult:
    text = ensure_text(menu_text, "menu_text")
    session_id = ensure_text(session_id, "session_id")
    log.debug("Parsing menu text with session: %s", session_id)

    _report(progress, 0)
    sections = detect_menu_sections(text)
    cuisine = detect_cuisine_type(text)
    _report(progress, 1)

    dishes: List[Dish] = []
    for s, section in enumerate(sections):
        for i, line in enumerate(section.dishes):
            dishes.append(build_dish(line, section.title, cuisine, session_id, s, i))
    _report(progress, 2)

    log.info(
        "Parsed menu session=%s sections=%d dishes=%d cuisine=%s",
        session_id, len(sections), len(dishes), cuisine,
    )
    _report(progress, 3)

    return MenuParseResult(
        session_id=session_id,
        cuisine=cuisine,
        sections=tuple(sections),
        dishes=tuple(dishes),
    )


def parse_menu_text(
    menu_text: str,
    session_id: str,
    progress: Optional[ProgressCallback] = None,
) -> List[Dish]:
    return list(parse_menu(menu_text, session_id, progress=progress).dishes)
