import logging
import requests
from typing import Optional

from constants import API_BASE_URL, EMPTY_RESULT_MESSAGE
from meal_models import Meal

logger = logging.getLogger(__name__)


class MealApiError(RuntimeError):
    """Base class for failures reported by the TheMealDB client."""


class MealNetworkError(MealApiError):
    def __init__(self, status_code: int, reason: str):
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class EmptyMealError(MealApiError):
    def __init__(self, message: str = EMPTY_RESULT_MESSAGE):
        super().__init__(message)


def fetch_random_meal(
    session: Optional[requests.Session] = None,
    base_url: str = API_BASE_URL
) -> Meal:
    """Fetch one random meal record from TheMealDB.

    Raises MealNetworkError on a non-success status and EmptyMealError when
    the body carries no meal. No retry and no timeout are applied.
    """
    url = f"{base_url.rstrip('/')}/random.php"
    get = session.get if session is not None else requests.get
    logger.debug("GET %s", url)
    resp = get(url)
    logger.debug("Response %s from %s", resp.status_code, url)
    if not resp.ok:
        raise MealNetworkError(resp.status_code, resp.reason or "")

    data = resp.json()
    meals = data.get("meals") if isinstance(data, dict) else None
    meal = meals[0] if isinstance(meals, list) and meals else None
    if not isinstance(meal, dict):
        raise EmptyMealError()
    return meal
