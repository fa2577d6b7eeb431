from __future__ import annotations

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipe_editor import create_app
from recipe_editor.editor import RecipeEditor
from recipe_editor.models import Recipe, RecipeComponent, sample_recipe


def create_test_client(recipe: Recipe | None = None):
    editor = RecipeEditor(recipe)
    app = create_app(editor=editor)
    app.config.update(TESTING=True)
    return app.test_client(), editor


def test_index_shows_editor_and_preview():
    client, _ = create_test_client()

    response = client.get("/")

    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert "Recipe Editor" in page
    assert 'value="pot-roast"' in page
    assert "ID: pot-roast" in page
    assert "• 2 tbsp soy sauce" in page
    assert "2. Add vegetables and simmer until tender." in page
    assert "• Tastes better the next day." in page


def test_update_recipe_details_updates_preview():
    client, editor = create_test_client()

    response = client.post(
        "/recipe",
        data={"id": "beef-stew", "title": "Beef stew"},
        follow_redirects=True,
    )

    assert response.status_code == 200
    assert editor.recipe.id == "beef-stew"
    assert editor.recipe.title == "Beef stew"
    assert "ID: beef-stew" in response.get_data(as_text=True)


def test_can_add_component_via_form():
    client, editor = create_test_client()

    response = client.post("/components")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("#component-2")
    assert editor.recipe.components[-1] == RecipeComponent(id="component-3", title="Component 3")


def test_cannot_delete_last_component():
    recipe = Recipe(id="toast", title="Toast", components=[RecipeComponent(id="main", title="Main")])
    client, editor = create_test_client(recipe)

    response = client.post("/components/0/delete", follow_redirects=True)

    assert response.status_code == 200
    assert editor.recipe == recipe
    assert "A recipe needs at least one component." in response.get_data(as_text=True)


def test_delete_component_removes_item():
    client, editor = create_test_client()

    client.post("/components/0/delete")

    assert [component.id for component in editor.recipe.components] == ["main"]


def test_update_component_details():
    client, editor = create_test_client()

    client.post("/components/1", data={"id": "beef", "title": "Beef"})

    assert editor.get_component_id(1) == "beef"
    assert editor.get_component_title(1) == "Beef"


def test_ingredient_routes():
    client, editor = create_test_client()

    client.post("/components/0/ingredients")
    client.post("/components/0/ingredients/2", data={"text": "1 tsp ginger"})
    assert editor.recipe.components[0].ingredients[-1] == "1 tsp ginger"

    client.post("/components/0/ingredients/0/delete")
    assert editor.recipe.components[0].ingredients == ["1 tbsp brown sugar", "1 tsp ginger"]


def test_step_routes():
    client, editor = create_test_client()

    client.post("/components/1/steps")
    client.post("/components/1/steps/2", data={"text": "Rest before slicing."})
    assert editor.recipe.components[1].steps[-1] == "Rest before slicing."

    client.post("/components/1/steps/0/delete")
    assert editor.recipe.components[1].steps == [
        "Add vegetables and simmer until tender.",
        "Rest before slicing.",
    ]


def test_note_routes_collapse_notes_when_emptied():
    client, editor = create_test_client()

    client.post("/notes")
    client.post("/notes/1", data={"text": "Freezes well."})
    assert editor.recipe.notes == ["Tastes better the next day.", "Freezes well."]

    client.post("/notes/1/delete")
    client.post("/notes/0/delete")
    assert editor.recipe.notes is None

    page = client.get("/").get_data(as_text=True)
    assert "No notes." in page


def test_stale_index_is_reported_and_ignored():
    client, editor = create_test_client()
    before = editor.recipe

    response = client.post("/components/9/ingredients/0/delete", follow_redirects=True)

    assert response.status_code == 200
    assert editor.recipe == before
    assert "That item no longer exists." in response.get_data(as_text=True)


def test_preview_text_endpoint():
    client, _ = create_test_client()

    response = client.get("/preview.txt")

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    lines = response.get_data(as_text=True).splitlines()
    assert lines[:2] == ["Pot roast", "ID: pot-roast"]
    assert "1. Sear the beef." in lines


def test_preview_page_renders_preview_only():
    client, _ = create_test_client()

    page = client.get("/preview").get_data(as_text=True)

    assert "Pot roast" in page
    assert "Add component" not in page


def test_recipe_json_omits_absent_notes():
    client, editor = create_test_client()

    assert client.get("/recipe.json").get_json()["notes"] == ["Tastes better the next day."]

    editor.delete_note(0)
    data = client.get("/recipe.json").get_json()
    assert "notes" not in data
    assert data["components"][0]["id"] == "marinade"


def test_default_app_starts_from_sample():
    app = create_app()

    assert app.config["RECIPE_EDITOR"].recipe == sample_recipe()


def test_successful_change_is_flashed():
    client, editor = create_test_client()

    response = client.post("/notes", follow_redirects=True)

    page = response.get_data(as_text=True)
    assert '<li class="flash-success">Note added.</li>' in page
    assert "flash-error" not in page
    assert editor.recipe.notes == ["Tastes better the next day.", ""]


def test_saving_recipe_details_is_flashed():
    client, _ = create_test_client()

    response = client.post("/recipe", data={"id": "stew", "title": "Stew"}, follow_redirects=True)

    assert '<li class="flash-success">Recipe details saved.</li>' in response.get_data(as_text=True)


def test_edit_pane_for_single_empty_component():
    recipe = Recipe(id="toast", title="Toast", components=[RecipeComponent(id="main", title="Main")])
    client, _ = create_test_client(recipe)

    page = client.get("/").get_data(as_text=True)

    assert '<button type="submit" disabled>Delete</button>' in page
    assert "No ingredients yet." in page
    assert "No steps yet." in page
    assert "No ingredients or steps yet." in page


def test_edit_pane_numbers_steps_and_enables_delete():
    client, _ = create_test_client()

    page = client.get("/").get_data(as_text=True)

    assert '<button type="submit" disabled>Delete</button>' not in page
    assert '<span class="secondary">1.</span>' in page
    assert '<span class="secondary">2.</span>' in page
    assert "No ingredients yet." not in page
    assert "No steps yet." not in page


def test_negative_index_is_reported_and_ignored():
    client, editor = create_test_client()
    before = editor.recipe

    for path in ("/components/-1/delete", "/notes/-1/delete", "/components/0/steps/-1"):
        response = client.post(path, data={"text": "x"})
        assert response.status_code == 302

    page = client.get("/").get_data(as_text=True)
    assert editor.recipe == before
    assert "That item no longer exists." in page
