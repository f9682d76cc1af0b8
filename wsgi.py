"""WSGI entry point for the todo service."""

import os

from todo_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])
