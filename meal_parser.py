from html import escape
from typing import Any, List, Optional

from constants import (
    INGREDIENTS_LIMIT,
    LINE_BREAK_RE,
    YOUTUBE_ID_LENGTH,
    YOUTUBE_ID_PATTERNS,
)
from meal_models import Meal, ParsedIngredient


def escape_html(text: Optional[str]) -> str:
    if text is None:
        return ""
    return escape(str(text), quote=True)


def clean_field(value: Any) -> str:
    # TheMealDB sends null or "" for unused slots
    if not isinstance(value, str):
        return ""
    return value.strip()


def parse_ingredients(meal: Meal) -> List[ParsedIngredient]:
    ingredients: List[ParsedIngredient] = []
    for i in range(1, INGREDIENTS_LIMIT + 1):
        name = clean_field(meal.get(f"strIngredient{i}"))
        if not name:
            continue
        measure = clean_field(meal.get(f"strMeasure{i}"))
        display = f"{name} – {measure}" if measure else name
        ingredients.append(ParsedIngredient(name=name, measure=measure, display=display))
    return ingredients


def split_instructions(instructions: Any) -> List[str]:
    text = clean_field(instructions)
    if not text:
        return []
    lines = [line.strip() for line in LINE_BREAK_RE.split(text)]
    return [line for line in lines if line]


def instruction_paragraphs(lines: List[str]) -> str:
    return "".join(
        f'<p class="meal__instruction-step">{escape_html(line)}</p>'
        for line in lines
    )


def format_instructions(instructions: Optional[str]) -> str:
    return instruction_paragraphs(split_instructions(instructions))


def extract_youtube_video_id(value: Optional[str]) -> Optional[str]:
    """Return the 11-character video id from a watch, short or embed URL.

    A bare id is accepted as well. Anything else of exactly 11 characters is
    returned as-is, since some records store the id without a URL.
    """
    if not value or not isinstance(value, str):
        return None
    trimmed = value.strip()
    for pattern in YOUTUBE_ID_PATTERNS:
        m = pattern.search(trimmed)
        if m:
            return m.group(1)
    return trimmed if len(trimmed) == YOUTUBE_ID_LENGTH else None
