"""Read-only preview of a recipe.

Everything here is derived from the recipe passed in; nothing is cached
between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .models import Recipe, RecipeComponent

UNTITLED_RECIPE = "Untitled"
UNTITLED_COMPONENT = "Untitled component"
MISSING_ID = "—"
EMPTY_COMPONENT = "No ingredients or steps yet."
BULLET = "•"


@dataclass(frozen=True)
class ComponentPreview:
    title: str
    ingredients: Tuple[str, ...]
    steps: Tuple[str, ...]
    placeholder: Optional[str] = None


@dataclass(frozen=True)
class RecipePreview:
    title: str
    id_line: str
    components: Tuple[ComponentPreview, ...]
    notes: Tuple[str, ...] = ()

    @property
    def has_notes(self) -> bool:
        return bool(self.notes)


def build_preview(recipe: Recipe) -> RecipePreview:
    """Project ``recipe`` into the lines shown in the preview pane."""

    return RecipePreview(
        title=recipe.title or UNTITLED_RECIPE,
        id_line=f"ID: {recipe.id or MISSING_ID}",
        components=tuple(_component_preview(component) for component in recipe.components),
        notes=tuple(_bullet(note) for note in recipe.notes or ()),
    )


def render_preview_text(recipe: Recipe) -> str:
    """Render the preview of ``recipe`` as plain text, one item per line."""

    preview = build_preview(recipe)
    lines = [preview.title, preview.id_line]

    for component in preview.components:
        lines.append("")
        lines.append(component.title)
        if component.ingredients:
            lines.append("Ingredients")
            lines.extend(component.ingredients)
        if component.steps:
            lines.append("Steps")
            lines.extend(component.steps)
        if component.placeholder:
            lines.append(component.placeholder)

    if preview.has_notes:
        lines.append("")
        lines.append("Notes")
        lines.extend(preview.notes)

    return "\n".join(lines) + "\n"


def _component_preview(component: RecipeComponent) -> ComponentPreview:
    placeholder = None
    if not component.ingredients and not component.steps:
        placeholder = EMPTY_COMPONENT

    return ComponentPreview(
        title=component.title or UNTITLED_COMPONENT,
        ingredients=tuple(_bullet(line) for line in component.ingredients),
        steps=tuple(f"{number}. {line}" for number, line in enumerate(component.steps, start=1)),
        placeholder=placeholder,
    )


def _bullet(line: str) -> str:
    return f"{BULLET} {line}"


__all__ = [
    "ComponentPreview",
    "RecipePreview",
    "build_preview",
    "render_preview_text",
]
