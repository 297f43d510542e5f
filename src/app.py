"""Flask application factory.

The task list is loaded once here and kept on app.extensions for the
lifetime of the process; routes reach it through current_app.
"""
import logging
from typing import Optional

from flask import Flask

from config import Settings
from routes import todos_bp
from storage import Storage
from todo_list import TodoList

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the app. Raises if the task file exists but is malformed."""
    settings = settings or Settings.from_env()

    app = Flask(__name__)
    app.config['TODO_SETTINGS'] = settings

    storage = Storage(settings.data_file)
    todo_list = TodoList(storage.load_tasks())
    app.extensions['todo_storage'] = storage
    app.extensions['todo_list'] = todo_list
    # one-shot error shared by every client, cleared by the next home render
    app.extensions['todo_error'] = None

    app.register_blueprint(todos_bp)
    logger.info("To-do list ready: %s (%s)", settings.data_file, todo_list)
    return app
