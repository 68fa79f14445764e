"""
WordMasterMind Game Server Package

A length-flexible Wordle/Mastermind game engine (dictionary store,
attempt evaluation, game sessions) with a thin Flask API on top.
"""

import logging

from flask import Flask
from flask_cors import CORS

from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .utils.game_logger import game_logger
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', logging.INFO))

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
