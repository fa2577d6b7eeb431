from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


@dataclass
class RecipeComponent:
    """A named section of a recipe, e.g. a marinade or the main dish."""

    id: str
    title: str
    ingredients: List[str] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)


@dataclass
class Recipe:
    """Domain object representing the recipe being edited.

    ``notes`` is ``None`` when the recipe has no notes. An empty list is never
    a valid resting state for it.
    """

    id: str
    title: str
    components: List[RecipeComponent]
    notes: Optional[List[str]] = None


def sample_recipe() -> Recipe:
    """Return a fresh copy of the recipe a new editing session starts with."""

    return Recipe(
        id="pot-roast",
        title="Pot roast",
        components=[
            RecipeComponent(
                id="marinade",
                title="Marinade",
                ingredients=["2 tbsp soy sauce", "1 tbsp brown sugar"],
                steps=["Mix the marinade ingredients."],
            ),
            RecipeComponent(
                id="main",
                title="Main",
                ingredients=["Beef chuck", "Onion", "Carrots"],
                steps=["Sear the beef.", "Add vegetables and simmer until tender."],
            ),
        ],
        notes=["Tastes better the next day."],
    )


def recipe_to_dict(recipe: Recipe) -> dict:
    """Return a JSON-ready snapshot of ``recipe``.

    The ``notes`` key is left out entirely when the recipe has no notes.
    """

    data: dict = {
        "id": recipe.id,
        "title": recipe.title,
        "components": [
            {
                "id": component.id,
                "title": component.title,
                "ingredients": list(component.ingredients),
                "steps": list(component.steps),
            }
            for component in recipe.components
        ],
    }
    if recipe.notes:
        data["notes"] = list(recipe.notes)
    return data


def recipe_from_dict(data: Mapping[str, Any]) -> Recipe:
    """Build a :class:`Recipe` from a snapshot produced by :func:`recipe_to_dict`."""

    components = data.get("components")
    if not isinstance(components, list):
        components = []

    notes = _parse_lines(data.get("notes"))

    return Recipe(
        id=_parse_text(data.get("id")),
        title=_parse_text(data.get("title")),
        components=[
            _component_from_dict(item) for item in components if isinstance(item, Mapping)
        ],
        notes=notes or None,
    )


def _component_from_dict(data: Mapping[str, Any]) -> RecipeComponent:
    return RecipeComponent(
        id=_parse_text(data.get("id")),
        title=_parse_text(data.get("title")),
        ingredients=_parse_lines(data.get("ingredients")),
        steps=_parse_lines(data.get("steps")),
    )


def _parse_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_lines(value: Any) -> List[str]:
    if isinstance(value, list):
        return [line for line in value if isinstance(line, str)]
    return []


__all__ = [
    "Recipe",
    "RecipeComponent",
    "recipe_from_dict",
    "recipe_to_dict",
    "sample_recipe",
]
