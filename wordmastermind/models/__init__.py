"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .dictionary_source import DICTIONARY_SOURCES, DictionarySource, DictionarySourceType, get_dictionary_source
from .game import Attempt, AttemptDetail, GameState, GameStatus, LetterEvaluation
from .word_store import WordStore

__all__ = [
    'Attempt', 'AttemptDetail', 'GameState', 'GameStatus', 'LetterEvaluation',
    'DICTIONARY_SOURCES', 'DictionarySource', 'DictionarySourceType', 'get_dictionary_source',
    'WordStore',
]
