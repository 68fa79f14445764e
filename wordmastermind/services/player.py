"""
Computer Player

Plays a GameSession without knowing the secret, by only guessing words
that agree with all the feedback received so far.
"""

import logging
import random
from typing import List, Optional, Tuple

from ..exceptions import EmptyRangeError
from ..models.game import Attempt, AttemptDetail
from .evaluator import evaluate
from .game_session import GameSession

logger = logging.getLogger(__name__)


def filter_candidates(words: List[str], attempt: Attempt) -> List[str]:
    """
    Keep the words that, had they been the secret, would have produced
    exactly the feedback recorded in ``attempt``.
    """
    return [word for word in words if evaluate(word, attempt.guess) == attempt.details]


class ComputerPlayer:
    """
    Candidate-elimination player.

    Every pick is consistent with all previous feedback, so it also
    satisfies hard-mode rules.
    """

    def __init__(self, session: GameSession, rng: Optional[random.Random] = None):
        self.session = session
        self.rng = rng or random.Random()
        self.candidates: List[str] = list(session.word_store.words(session.word_length))
        self._seen_attempts = 0

    def _refresh_candidates(self) -> None:
        # Narrow with any attempts made since the last turn, including ones
        # submitted to the session by someone else
        history = self.session.history
        for attempt in history[self._seen_attempts:]:
            self.candidates = filter_candidates(self.candidates, attempt)
        self._seen_attempts = len(history)

    def next_guess(self) -> str:
        self._refresh_candidates()
        if not self.candidates:
            raise EmptyRangeError("No dictionary word is consistent with the feedback so far")
        return self.rng.choice(self.candidates)

    def play_turn(self) -> Tuple[str, Tuple[AttemptDetail, ...]]:
        guess = self.next_guess()
        details = self.session.attempt(guess)
        logger.debug("Computer guessed %s (%d candidates)", guess, len(self.candidates))
        return guess, details

    def play(self, turns: Optional[int] = None) -> List[Attempt]:
        """
        Play until the session ends, or for at most ``turns`` guesses.

        Returns:
            The attempts made by this call, in order
        """
        played: List[Attempt] = []
        while not (self.session.solved or self.session.over):
            if turns is not None and len(played) >= turns:
                break
            guess, details = self.play_turn()
            played.append(Attempt(guess, details))
        return played
