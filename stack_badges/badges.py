import os
from collections.abc import Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .languages import LANGUAGES, get_language

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")


def parse_requested_keys(value) -> list[str]:
    """Normalizes the `languages` input field into a list of badge keys.

    None selects every registered key. A string is split on commas. Blank items are dropped.
    """
    if value is None:
        return list(LANGUAGES)

    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]

    if isinstance(value, list):
        keys = []
        for item in value:
            if not isinstance(item, str):
                raise TypeError(f"Language keys must be strings, got {type(item).__name__}")
            if item.strip():
                keys.append(item.strip())
        return keys

    raise TypeError(f"'languages' must be a list or a comma-separated string, got {type(value).__name__}")


def build_badges(keys: Iterable[str]) -> list[dict]:
    badges = []
    for key in keys:
        badge = {"key": key}
        badge.update(get_language(key).to_dict())
        badge["fallback"] = key not in LANGUAGES
        badges.append(badge)
    return badges


def render_badges(badges: list[dict], title: str = "Tech Stack") -> str:
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("badges.html")
    return template.render(title=title, count=len(badges), badges=badges)
