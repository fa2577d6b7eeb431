from __future__ import annotations

from typing import Protocol

from .models import Recipe
from .preview import RecipePreview


class RecipeEditorBackend(Protocol):
    """Protocol describing the behaviour required by the web layer."""

    @property
    def recipe(self) -> Recipe:
        """Return a snapshot of the recipe being edited."""

    def preview(self) -> RecipePreview:
        """Return the preview of the current recipe."""

    def component_count(self) -> int:
        ...

    def can_delete_component(self) -> bool:
        """Return ``True`` when more than one component exists."""

    def add_component(self) -> bool:
        """Append a new, empty component."""

    def delete_component(self, index: int) -> bool:
        """Remove a component unless it is the last one."""

    def add_ingredient(self, component_index: int) -> bool:
        ...

    def delete_ingredient(self, component_index: int, ingredient_index: int) -> bool:
        ...

    def add_step(self, component_index: int) -> bool:
        ...

    def delete_step(self, component_index: int, step_index: int) -> bool:
        ...

    def add_note(self) -> bool:
        """Append an empty note, creating the notes section if needed."""

    def delete_note(self, index: int) -> bool:
        """Remove a note, dropping the notes section once it is empty."""

    def set_id(self, value: str) -> bool:
        ...

    def set_title(self, value: str) -> bool:
        ...

    def set_component_id(self, component_index: int, value: str) -> bool:
        ...

    def set_component_title(self, component_index: int, value: str) -> bool:
        ...

    def set_ingredient(self, component_index: int, ingredient_index: int, value: str) -> bool:
        ...

    def set_step(self, component_index: int, step_index: int, value: str) -> bool:
        ...

    def set_note(self, note_index: int, value: str) -> bool:
        ...


__all__ = ["RecipeEditorBackend"]
