"""Application logging setup."""

import logging

from flask.logging import default_handler

LOG_FORMAT = '[epaper] %(asctime)s %(levelname)s %(name)s %(message)s'


def configure_logging(app):
    """Apply ``LOG_LEVEL`` and a common format to Flask's logger."""
    level_name = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    app.logger.setLevel(getattr(logging, level_name, logging.INFO))
    default_handler.setFormatter(logging.Formatter(LOG_FORMAT))
