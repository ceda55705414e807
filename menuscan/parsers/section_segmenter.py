"""
Section Segmenter
Splits OCR menu text into titled sections of raw candidate dish lines.
"""

import re
from typing import List, Optional, Sequence

from menuscan.contracts import ensure_text
from menuscan.lexicon import MIN_DISH_LINE_CHARS, SECTION_HEADERS
from menuscan.menu_types import MenuSection

# --- Helpers ---------------------------------------------------------------

_LONE_PRICE_RX = re.compile(r"^\$\d+")


def _normalize_lines(raw_text: str) -> List[str]:
    # "\n" only, unlike str.splitlines()
    return [l.strip() for l in raw_text.split("\n") if l.strip()]


def is_section_header(line: str, headers: Sequence[str] = SECTION_HEADERS) -> bool:
    low = (line or "").lower()
    return any(h in low for h in headers)


def is_noise_line(line: str) -> bool:
    """Too short to be a dish, or a price sitting on its own line."""
    return len(line) < MIN_DISH_LINE_CHARS or bool(_LONE_PRICE_RX.match(line))

# --- Core ------------------------------------------------------------------

def detect_menu_sections(
    raw_text: str,
    headers: Sequence[str] = SECTION_HEADERS,
) -> List[MenuSection]:
    """
    Single pass over the lines. A header line closes the current section
    (kept only if it collected dish lines) and opens a new one; lines seen
    before the first header have no section and are dropped.
    """
    lines = _normalize_lines(ensure_text(raw_text))
    sections: List[MenuSection] = []
    current_title: Optional[str] = None
    current_dishes: List[str] = []

    for line in lines:
        if is_section_header(line, headers):
            if current_title and current_dishes:
                sections.append(MenuSection(title=current_title, dishes=tuple(current_dishes)))
            current_title = line
            current_dishes = []
        elif not is_noise_line(line):
            current_dishes.append(line)

    if current_title and current_dishes:
        sections.append(MenuSection(title=current_title, dishes=tuple(current_dishes)))

    return sections
