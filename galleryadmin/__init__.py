# galleryadmin/__init__.py
"""
Creates the Flask app (application factory pattern).

create_app() takes the config class so tests can swap in TestConfig.
"""

import logging

from flask import Flask

from .config import Config
from .extensions import db


def configure_logging(app: Flask) -> None:
    """One stdout handler on the package logger; services log to its children."""
    logger = logging.getLogger(__name__)
    logger.setLevel(app.config["LOG_LEVEL"].upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)

    app.config.from_object(config_object)

    configure_logging(app)

    db.init_app(app)

    # Create database tables the first time
    with app.app_context():
        from . import models  # ensures models are registered before create_all()
        db.create_all()

    from .routes.artists import bp as artists_bp
    from .routes.art_pieces import bp as art_pieces_bp
    from .routes.certificates import bp as certificates_bp
    from .routes.transactions import bp as transactions_bp

    app.register_blueprint(artists_bp)
    app.register_blueprint(art_pieces_bp)
    app.register_blueprint(certificates_bp)
    app.register_blueprint(transactions_bp)

    from .cli import register_commands
    register_commands(app)

    return app
