"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate, feedback_pattern
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .player import ComputerPlayer, filter_candidates

__all__ = [
    'evaluate', 'feedback_pattern',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service',
    'ComputerPlayer', 'filter_candidates',
]
