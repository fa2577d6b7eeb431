from __future__ import annotations

import copy
import logging
from typing import List, Optional, Sequence

from .models import Recipe, RecipeComponent, sample_recipe
from .preview import RecipePreview, build_preview

logger = logging.getLogger(__name__)


def _in_range(items: Sequence, index: int) -> bool:
    return 0 <= index < len(items)


class RecipeEditor:
    """Owns the recipe being edited and applies changes to it.

    Every operation that takes an index treats an out-of-range index as a
    no-op. Mutations return ``True`` when the recipe changed and ``False``
    otherwise. Getters return an empty string for positions that do not exist.
    """

    def __init__(self, recipe: Optional[Recipe] = None) -> None:
        initial = recipe if recipe is not None else sample_recipe()
        self._recipe = copy.deepcopy(initial)
        if not self._recipe.notes:
            self._recipe.notes = None

    @property
    def recipe(self) -> Recipe:
        """Return a snapshot of the current recipe."""

        return copy.deepcopy(self._recipe)

    def preview(self) -> RecipePreview:
        return build_preview(self._recipe)

    def component_count(self) -> int:
        return len(self._recipe.components)

    def can_delete_component(self) -> bool:
        return len(self._recipe.components) > 1

    # Components

    def add_component(self) -> bool:
        number = len(self._recipe.components) + 1
        self._recipe.components.append(
            RecipeComponent(id=f"component-{number}", title=f"Component {number}")
        )
        return True

    def delete_component(self, index: int) -> bool:
        if not self.can_delete_component():
            logger.debug("Refusing to delete the only component")
            return False
        if not _in_range(self._recipe.components, index):
            logger.debug("Ignoring delete of missing component %s", index)
            return False
        del self._recipe.components[index]
        return True

    # Ingredients

    def add_ingredient(self, component_index: int) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        component.ingredients.append("")
        return True

    def delete_ingredient(self, component_index: int, ingredient_index: int) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        return self._delete_line(component.ingredients, ingredient_index)

    # Steps

    def add_step(self, component_index: int) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        component.steps.append("")
        return True

    def delete_step(self, component_index: int, step_index: int) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        return self._delete_line(component.steps, step_index)

    # Notes

    def add_note(self) -> bool:
        notes = list(self._recipe.notes or [])
        notes.append("")
        self._store_notes(notes)
        return True

    def delete_note(self, index: int) -> bool:
        notes = list(self._recipe.notes or [])
        if not self._delete_line(notes, index):
            return False
        self._store_notes(notes)
        return True

    def _store_notes(self, notes: List[str]) -> None:
        self._recipe.notes = notes or None

    # Field accessors

    def get_id(self) -> str:
        return self._recipe.id

    def set_id(self, value: str) -> bool:
        self._recipe.id = value
        return True

    def get_title(self) -> str:
        return self._recipe.title

    def set_title(self, value: str) -> bool:
        self._recipe.title = value
        return True

    def get_component_id(self, component_index: int) -> str:
        component = self._component(component_index)
        return component.id if component is not None else ""

    def set_component_id(self, component_index: int, value: str) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        component.id = value
        return True

    def get_component_title(self, component_index: int) -> str:
        component = self._component(component_index)
        return component.title if component is not None else ""

    def set_component_title(self, component_index: int, value: str) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        component.title = value
        return True

    def get_ingredient(self, component_index: int, ingredient_index: int) -> str:
        component = self._component(component_index)
        if component is None:
            return ""
        return self._get_line(component.ingredients, ingredient_index)

    def set_ingredient(self, component_index: int, ingredient_index: int, value: str) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        return self._set_line(component.ingredients, ingredient_index, value)

    def get_step(self, component_index: int, step_index: int) -> str:
        component = self._component(component_index)
        if component is None:
            return ""
        return self._get_line(component.steps, step_index)

    def set_step(self, component_index: int, step_index: int, value: str) -> bool:
        component = self._component(component_index)
        if component is None:
            return False
        return self._set_line(component.steps, step_index, value)

    def get_note(self, note_index: int) -> str:
        return self._get_line(self._recipe.notes or [], note_index)

    def set_note(self, note_index: int, value: str) -> bool:
        # Writing never creates the notes list.
        if self._recipe.notes is None:
            return False
        return self._set_line(self._recipe.notes, note_index, value)

    # Helpers

    def _component(self, index: int) -> Optional[RecipeComponent]:
        if not _in_range(self._recipe.components, index):
            logger.debug("Ignoring operation on missing component %s", index)
            return None
        return self._recipe.components[index]

    @staticmethod
    def _get_line(lines: List[str], index: int) -> str:
        if not _in_range(lines, index):
            return ""
        return lines[index]

    @staticmethod
    def _set_line(lines: List[str], index: int, value: str) -> bool:
        if not _in_range(lines, index):
            logger.debug("Ignoring write to missing line %s", index)
            return False
        lines[index] = value
        return True

    @staticmethod
    def _delete_line(lines: List[str], index: int) -> bool:
        if not _in_range(lines, index):
            logger.debug("Ignoring delete of missing line %s", index)
            return False
        del lines[index]
        return True


__all__ = ["RecipeEditor"]
