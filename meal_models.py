from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# Raw TheMealDB record, keyed by the API's own field names.
Meal = Dict[str, Any]


@dataclass
class ParsedIngredient:
    """One non-empty ingredient slot of a meal."""

    name: str
    measure: str = ""
    display: str = ""


@dataclass
class MealCard:
    """Everything the card markup needs, already parsed but not escaped."""

    title: str
    image_url: str = ""
    image_alt: str = ""
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    video_id: Optional[str] = None

    @property
    def has_video(self) -> bool:
        return bool(self.video_id)


class UiState(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"
