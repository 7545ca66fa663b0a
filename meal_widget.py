import logging
import requests
from typing import Callable, Optional

from constants import (
    BUTTON_ID,
    CONTAINER_ID,
    FALLBACK_ERROR_MESSAGE,
    MISSING_ELEMENTS_MESSAGE,
)
from meal_models import Meal, MealCard, UiState
from meal_renderer import render_error, render_loading, render_meal
from mealdb_client import MealApiError, fetch_random_meal
from page_elements import DisplayContainer, Page, TriggerButton

logger = logging.getLogger(__name__)

RECOGNIZED_ERRORS = (MealApiError, requests.RequestException)


def error_message(error: BaseException) -> str:
    if isinstance(error, RECOGNIZED_ERRORS) and str(error):
        return str(error)
    return FALLBACK_ERROR_MESSAGE


def set_button_loading(button: TriggerButton, is_loading: bool) -> None:
    button.disabled = is_loading
    button.attributes["aria-busy"] = "true" if is_loading else "false"
    button.label_hidden = is_loading
    button.loader_hidden = not is_loading


class MealWidget:
    """Wires a trigger button to the fetch-and-render cycle."""

    def __init__(
        self,
        trigger: TriggerButton,
        container: DisplayContainer,
        fetch_meal: Callable[[], Meal] = fetch_random_meal
    ):
        self.trigger = trigger
        self.container = container
        self.fetch_meal = fetch_meal
        self.state: Optional[UiState] = None
        self.card: Optional[MealCard] = None

    def bind(self) -> None:
        self.trigger.add_click_listener(self.handle_click)

    def handle_click(self) -> None:
        set_button_loading(self.trigger, True)
        try:
            render_loading(self.container)
            self.state = UiState.LOADING
            meal = self.fetch_meal()
            self.card = render_meal(self.container, meal)
            self.state = UiState.LOADED
        except Exception as e:
            logger.exception("[Random Meal] %s", e)
            self.card = None
            render_error(self.container, error_message(e))
            self.state = UiState.ERROR
        finally:
            set_button_loading(self.trigger, False)


def init_widget(page: Page, fetch_meal: Callable[[], Meal] = fetch_random_meal) -> Optional[MealWidget]:
    button = page.get_element_by_id(BUTTON_ID)
    container = page.get_element_by_id(CONTAINER_ID)
    if not isinstance(button, TriggerButton) or not isinstance(container, DisplayContainer):
        logger.error(MISSING_ELEMENTS_MESSAGE)
        return None

    widget = MealWidget(button, container, fetch_meal)
    widget.bind()
    return widget
