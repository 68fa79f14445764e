"""
Game Service

Registry of live game sessions sharing one dictionary.
"""

import logging
import random
import threading
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import DEFAULT_MAX_WORD_LENGTH, DEFAULT_MIN_WORD_LENGTH
from ..exceptions import GameNotFoundError
from ..models.game import AttemptDetail, GameState
from ..models.word_store import WordStore
from .game_session import GameSession

logger = logging.getLogger(__name__)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret word selection from the shared dictionary
    - Routing guesses to the owning session
    - Game state snapshots without exposing answers to clients

    The registry itself is locked; individual sessions are not, so a
    client must not submit overlapping guesses for the same game.
    """

    def __init__(self,
                 word_store: WordStore,
                 default_min_length: int = DEFAULT_MIN_WORD_LENGTH,
                 default_max_length: int = DEFAULT_MAX_WORD_LENGTH,
                 default_hard_mode: bool = False,
                 seed: Optional[int] = None):
        self.word_store = word_store
        self.default_min_length = default_min_length
        self.default_max_length = default_max_length
        self.default_hard_mode = default_hard_mode
        self.rng = random.Random(seed)
        self.games: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_new_game(self,
                        min_length: Optional[int] = None,
                        max_length: Optional[int] = None,
                        hard_mode: Optional[bool] = None,
                        secret_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            min_length: Shortest allowed secret (service default if omitted)
            max_length: Longest allowed secret (service default if omitted)
            hard_mode: Require guesses to reuse revealed hints
            secret_word: Explicit secret; drawn at random when omitted

        Returns:
            str: Unique game ID for this session
        """
        min_length = self.default_min_length if min_length is None else min_length
        max_length = self.default_max_length if max_length is None else max_length
        hard_mode = self.default_hard_mode if hard_mode is None else hard_mode

        with self._lock:
            session = GameSession(
                min_length=min_length,
                max_length=max_length,
                hard_mode=hard_mode,
                word_store=self.word_store,
                secret_word=secret_word,
                rng=self.rng,
            )
            game_id = str(uuid.uuid4())
            self.games[game_id] = session

        logger.info("Created game %s (length=%d, hard_mode=%s)", game_id, session.word_length, hard_mode)
        return game_id

    def get_session(self, game_id: str) -> GameSession:
        with self._lock:
            session = self.games.get(game_id)
        if session is None:
            raise GameNotFoundError(f"Game not found: {game_id}")
        return session

    def get_game_state(self, game_id: str) -> GameState:
        """
        Returns the current game state for a session (without revealing the answer).

        Raises:
            GameNotFoundError: If no game has this ID
        """
        return self.get_session(game_id).snapshot(game_id)

    def make_guess(self, game_id: str, guess: str) -> Tuple[Tuple[AttemptDetail, ...], GameState]:
        """
        Processes a guess and returns its feedback with the updated state.

        Engine errors from the session propagate unchanged.
        """
        session = self.get_session(game_id)
        details = session.attempt(guess)
        return details, session.snapshot(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def active_game_count(self) -> int:
        with self._lock:
            return len(self.games)

    def valid_word_lengths(self) -> List[int]:
        return sorted(self.word_store.lengths())


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_store: WordStore, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_store, **kwargs)
    return _game_service
