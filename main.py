"""WSGI entrypoint for the recipe editor.

The editor keeps its recipe in process memory, so run it as a single process
that handles one request at a time::

    flask --app main run --without-threads

The ``app`` object is defined below.
"""

from recipe_editor import create_app

app = create_app()


__all__ = ["app"]
