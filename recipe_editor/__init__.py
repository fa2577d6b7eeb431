import os
from typing import Optional

from flask import Flask, Response, flash, jsonify, redirect, render_template, request, url_for

from .contract import RecipeEditorBackend
from .editor import RecipeEditor
from .models import Recipe, RecipeComponent, recipe_to_dict, sample_recipe
from .preview import render_preview_text

MISSING_ITEM_MESSAGE = "That item no longer exists."
LAST_COMPONENT_MESSAGE = "A recipe needs at least one component."


def create_app(editor: Optional[RecipeEditorBackend] = None) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    editor:
        Optional editor backend. When ``None`` the application edits a fresh
        copy of the sample recipe, held in memory for the life of the process.
    """

    app = Flask(__name__)
    app.config.setdefault("MAX_CONTENT_LENGTH", 1024 * 1024)
    app.secret_key = os.environ.get("FLASK_SECRET_KEY", "development-secret-change-me")

    if editor is None:
        editor = RecipeEditor(sample_recipe())
    app.config["RECIPE_EDITOR"] = editor

    def _editor() -> RecipeEditorBackend:
        return app.config["RECIPE_EDITOR"]

    def _back_to(anchor: Optional[str] = None):
        return redirect(url_for("index", _anchor=anchor))

    def _report(changed: bool, message: str, anchor: Optional[str] = None):
        if changed:
            app.logger.info("Recipe editor: %s (%s)", message, request.path)
            flash(message, "success")
        else:
            app.logger.debug("Recipe editor: ignored %s", request.path)
            flash(MISSING_ITEM_MESSAGE, "error")
        return _back_to(anchor)

    @app.get("/")
    def index() -> str:
        backend = _editor()
        return render_template(
            "index.html",
            recipe=backend.recipe,
            preview=backend.preview(),
            can_delete_component=backend.can_delete_component(),
            title="Recipe Editor",
        )

    @app.get("/preview")
    def preview() -> str:
        return render_template("preview.html", preview=_editor().preview(), title="Preview")

    @app.get("/preview.txt")
    def preview_text() -> Response:
        text = render_preview_text(_editor().recipe)
        return Response(text, mimetype="text/plain")

    @app.get("/recipe.json")
    def recipe_json() -> Response:
        return jsonify(recipe_to_dict(_editor().recipe))

    @app.post("/recipe")
    def update_recipe():
        backend = _editor()
        changed = backend.set_id(request.form.get("id", ""))
        changed = backend.set_title(request.form.get("title", "")) and changed
        return _report(changed, "Recipe details saved.", "recipe")

    # Components

    @app.post("/components")
    def add_component():
        backend = _editor()
        changed = backend.add_component()
        new_index = backend.component_count() - 1
        return _report(changed, "Component added.", f"component-{new_index}")

    @app.post("/components/<int(signed=True):component_index>")
    def update_component(component_index: int):
        backend = _editor()
        changed = backend.set_component_id(component_index, request.form.get("id", ""))
        changed = backend.set_component_title(
            component_index, request.form.get("title", "")
        ) and changed
        return _report(changed, "Component saved.", f"component-{component_index}")

    @app.post("/components/<int(signed=True):component_index>/delete")
    def delete_component(component_index: int):
        backend = _editor()
        if not backend.can_delete_component():
            flash(LAST_COMPONENT_MESSAGE, "error")
            return _back_to("components")
        changed = backend.delete_component(component_index)
        return _report(changed, "Component deleted.", "components")

    # Ingredients

    @app.post("/components/<int(signed=True):component_index>/ingredients")
    def add_ingredient(component_index: int):
        changed = _editor().add_ingredient(component_index)
        return _report(changed, "Ingredient added.", f"component-{component_index}")

    @app.post(
        "/components/<int(signed=True):component_index>"
        "/ingredients/<int(signed=True):ingredient_index>"
    )
    def update_ingredient(component_index: int, ingredient_index: int):
        changed = _editor().set_ingredient(
            component_index, ingredient_index, request.form.get("text", "")
        )
        return _report(changed, "Ingredient saved.", f"component-{component_index}")

    @app.post(
        "/components/<int(signed=True):component_index>"
        "/ingredients/<int(signed=True):ingredient_index>/delete"
    )
    def delete_ingredient(component_index: int, ingredient_index: int):
        changed = _editor().delete_ingredient(component_index, ingredient_index)
        return _report(changed, "Ingredient deleted.", f"component-{component_index}")

    # Steps

    @app.post("/components/<int(signed=True):component_index>/steps")
    def add_step(component_index: int):
        changed = _editor().add_step(component_index)
        return _report(changed, "Step added.", f"component-{component_index}")

    @app.post(
        "/components/<int(signed=True):component_index>/steps/<int(signed=True):step_index>"
    )
    def update_step(component_index: int, step_index: int):
        changed = _editor().set_step(component_index, step_index, request.form.get("text", ""))
        return _report(changed, "Step saved.", f"component-{component_index}")

    @app.post(
        "/components/<int(signed=True):component_index>"
        "/steps/<int(signed=True):step_index>/delete"
    )
    def delete_step(component_index: int, step_index: int):
        changed = _editor().delete_step(component_index, step_index)
        return _report(changed, "Step deleted.", f"component-{component_index}")

    # Notes

    @app.post("/notes")
    def add_note():
        changed = _editor().add_note()
        return _report(changed, "Note added.", "notes")

    @app.post("/notes/<int(signed=True):note_index>")
    def update_note(note_index: int):
        changed = _editor().set_note(note_index, request.form.get("text", ""))
        return _report(changed, "Note saved.", "notes")

    @app.post("/notes/<int(signed=True):note_index>/delete")
    def delete_note(note_index: int):
        changed = _editor().delete_note(note_index)
        return _report(changed, "Note deleted.", "notes")

    return app


__all__ = ["create_app", "Recipe", "RecipeComponent", "RecipeEditor"]
