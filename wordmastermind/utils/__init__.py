"""
Utilities Package

Contains utility functions, binary stream helpers and the game logger.
"""

from .game_logger import game_logger, GameLogger
from .helpers import get_user_identity, parse_bool

__all__ = ['game_logger', 'GameLogger', 'get_user_identity', 'parse_bool']
