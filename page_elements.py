from dataclasses import dataclass, field
from html import escape
from typing import Callable, Dict, List, Optional, Set, Union

from constants import BUTTON_ID, CONTAINER_ID, LOADING_TEXT


@dataclass
class TriggerButton:
    """Button that starts a fetch; mirrors the attributes the widget toggles."""

    id: str = BUTTON_ID
    label: str = "Gerar receita aleatória"
    disabled: bool = False
    label_hidden: bool = False
    loader_hidden: bool = True
    attributes: Dict[str, str] = field(default_factory=dict)
    _listeners: List[Callable[[], None]] = field(default_factory=list, repr=False)

    def add_click_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def click(self) -> None:
        if self.disabled:
            return
        for listener in list(self._listeners):
            listener()

    def to_html(self) -> str:
        disabled = " disabled" if self.disabled else ""
        busy = escape(self.attributes.get("aria-busy", "false"))
        text_hidden = " hidden" if self.label_hidden else ""
        loader_hidden = " hidden" if self.loader_hidden else ""
        return (
            f'<button id="{escape(self.id)}" class="btn" type="button" aria-busy="{busy}"{disabled}>'
            f'<span class="btn__text"{text_hidden}>{escape(self.label)}</span>'
            f'<span class="btn__loader"{loader_hidden}>{escape(LOADING_TEXT)}</span>'
            "</button>"
        )


@dataclass
class DisplayContainer:
    id: str = CONTAINER_ID
    inner_html: str = ""
    classes: Set[str] = field(default_factory=lambda: {"meal"})

    def to_html(self) -> str:
        class_attr = escape(" ".join(sorted(self.classes)))
        return f'<section id="{escape(self.id)}" class="{class_attr}">{self.inner_html}</section>'


Element = Union[TriggerButton, DisplayContainer]


class Page:
    """Minimal element registry standing in for the browser document."""

    def __init__(self, title: str = "Random Meal Generator"):
        self.title = title
        self._elements: Dict[str, Element] = {}

    def add(self, element: Element) -> Element:
        self._elements[element.id] = element
        return element

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def to_html(self) -> str:
        body = "\n".join(el.to_html() for el in self._elements.values())
        return (
            "<!DOCTYPE html>\n"
            '<html lang="pt-BR">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(self.title)}</title>\n"
            "</head>\n"
            "<body>\n"
            f"{body}\n"
            "</body>\n"
            "</html>\n"
        )


def default_page() -> Page:
    page = Page()
    page.add(TriggerButton())
    page.add(DisplayContainer())
    return page
