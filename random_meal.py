import argparse
import logging
import os
from functools import partial
from pathlib import Path
from typing import Optional

import requests
from dotenv import load_dotenv

from constants import API_BASE_URL
from meal_models import UiState
from meal_widget import MealWidget, init_widget
from mealdb_client import fetch_random_meal
from page_elements import Page, default_page

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def output_path(out_dir: Path, widget: MealWidget) -> Path:
    if widget.state is UiState.LOADED and widget.card and widget.card.title:
        name = widget.card.title.replace("/", "-")[:80]
    else:
        name = "erro"
    return out_dir / f"{name}.html"


def run(page: Page, count: int, base_url: str, session: Optional[requests.Session] = None) -> Optional[MealWidget]:
    widget = init_widget(page, partial(fetch_random_meal, session=session, base_url=base_url))
    if widget is None:
        return None
    for _ in range(count):
        widget.trigger.click()
    return widget


def main():
    load_dotenv()
    ap = argparse.ArgumentParser(description="Fetch a random meal from TheMealDB and save it as an HTML card.")
    ap.add_argument("--out-dir", default="./out", help="Output directory for HTML pages")
    ap.add_argument("--count", type=int, default=1, help="How many times to press the button (last meal is kept)")
    ap.add_argument("--verbose", action="store_true", help="Log HTTP requests")
    args = ap.parse_args()

    if args.count < 1:
        raise SystemExit("--count must be at least 1.")
    setup_logging(args.verbose)

    base_url = os.getenv("MEALDB_API_BASE_URL") or API_BASE_URL
    page = default_page()
    with requests.Session() as session:
        widget = run(page, args.count, base_url, session)
    if widget is None:
        raise SystemExit("Page is missing the button or the meal container.")

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    html_path = output_path(out_dir, widget)
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(page.to_html())

    print("Done.")
    print("HTML:", html_path)


if __name__ == "__main__":
    main()
