from typing import List

from constants import ERROR_HINT, LOADED_CLASS, LOADING_TEXT, YOUTUBE_EMBED_BASE
from meal_models import Meal, MealCard
from meal_parser import (
    clean_field,
    escape_html,
    extract_youtube_video_id,
    instruction_paragraphs,
    parse_ingredients,
    split_instructions,
)
from page_elements import DisplayContainer


def build_meal_card(meal: Meal) -> MealCard:
    title = clean_field(meal.get("strMeal"))
    return MealCard(
        title=title,
        image_url=clean_field(meal.get("strMealThumb")),
        image_alt=f"Foto da receita: {title}",
        ingredients=[ing.display for ing in parse_ingredients(meal)],
        instructions=split_instructions(meal.get("strInstructions")),
        video_id=extract_youtube_video_id(meal.get("strYoutube"))
    )


def _section_title(content: str) -> str:
    return f'<h3 class="meal__section-title">{escape_html(content)}</h3>'


def _ingredient_items(items: List[str]) -> str:
    return "".join(f'<li class="meal__ingredient">{escape_html(item)}</li>' for item in items)


def _video_section(card: MealCard) -> str:
    if not card.has_video:
        return ""
    return (
        _section_title("Vídeo da Receita")
        + '<div class="meal__video-wrapper">'
        + '<iframe class="meal__video"'
        + f' src="{YOUTUBE_EMBED_BASE}/{escape_html(card.video_id)}"'
        + f' title="Vídeo da receita: {escape_html(card.title)}"'
        + ' allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"'
        + ' allowfullscreen loading="lazy"></iframe>'
        + "</div>"
    )


def render_card_html(card: MealCard) -> str:
    # instruction_paragraphs escapes each line itself
    instructions_html = instruction_paragraphs(card.instructions)
    parts = [
        '<article class="meal__card">',
        f'<h2 class="meal__name">{escape_html(card.title)}</h2>',
        f'<img class="meal__image" src="{escape_html(card.image_url)}"'
        f' alt="{escape_html(card.image_alt)}" loading="lazy" width="600" height="400">',
        _section_title("Ingredientes"),
        f'<ul class="meal__ingredients">{_ingredient_items(card.ingredients)}</ul>',
        _section_title("Modo de Preparo"),
        f'<div class="meal__instructions">{instructions_html}</div>',
        _video_section(card),
        "</article>",
    ]
    return "".join(parts)


def render_loading_html() -> str:
    return f'<p class="meal__loading">{escape_html(LOADING_TEXT)}</p>'


def render_error_html(message: str) -> str:
    return (
        '<div class="meal__error" role="alert">'
        f'<p class="meal__error-text">{escape_html(message)}</p>'
        f'<p class="meal__error-hint">{escape_html(ERROR_HINT)}</p>'
        "</div>"
    )


def render_loading(container: DisplayContainer) -> None:
    container.inner_html = render_loading_html()
    container.classes.discard(LOADED_CLASS)


def render_meal(container: DisplayContainer, meal: Meal) -> MealCard:
    card = build_meal_card(meal)
    container.inner_html = render_card_html(card)
    container.classes.add(LOADED_CLASS)
    return card


def render_error(container: DisplayContainer, message: str) -> None:
    container.inner_html = render_error_html(message)
    container.classes.discard(LOADED_CLASS)
