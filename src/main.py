"""Main entry point: `web-todo` serves the to-do list over HTTP.

Options override the environment (PORT, TODO_HOST, TODO_DATA_FILE).
"""
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from app import create_app
from config import Settings
from logging_setup import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option('--host', default=None, help='Listen address (default: $TODO_HOST or 127.0.0.1).')
@click.option('--port', type=int, default=None, help='Listen port (default: $PORT or 3000).')
@click.option('--data-file', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='JSON file holding the task list (default: $TODO_DATA_FILE or todos.json).')
@click.option('--debug', is_flag=True, help='Verbose logging and Flask debug mode.')
def main(host: Optional[str], port: Optional[int], data_file: Optional[Path], debug: bool) -> None:
    settings = Settings.from_env()
    overrides = {k: v for k, v in (('host', host), ('port', port), ('data_file', data_file)) if v is not None}
    if debug:
        overrides['log_level'] = 'DEBUG'
    settings = replace(settings, **overrides)

    setup_logging(console_level=settings.log_level, log_file=settings.log_file)
    try:
        app = create_app(settings)
    except ValueError:
        # JSONDecodeError included
        logger.exception("Task file %s is not a valid task list", settings.data_file)
        sys.exit(1)

    logger.info("Running at http://%s:%d", settings.host, settings.port)
    # one request at a time: each read-modify-persist cycle runs alone
    app.run(host=settings.host, port=settings.port, debug=debug, threaded=False, use_reloader=False)


if __name__ == "__main__":
    main()
