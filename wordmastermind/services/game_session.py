"""
Game Session

One game against one secret word: validates attempts, scores them and
tracks the in-progress / solved / game-over lifecycle.
"""

import logging
import random
from collections import Counter
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import max_attempts_for_length
from ..exceptions import (
    ArgumentError, GameOverError, HardModeViolationError, LengthMismatchError, NotInDictionaryError,
)
from ..models.game import Attempt, AttemptDetail, GameState, GameStatus, LetterEvaluation
from ..models.word_store import WordStore, normalize_word
from .evaluator import evaluate

logger = logging.getLogger(__name__)


class GameSession:
    """
    Single-player game session.

    The session owns its history and status; the WordStore is shared and
    only read. Calls to ``attempt`` on one session must not overlap.
    """

    max_attempts_for_length = staticmethod(max_attempts_for_length)

    def __init__(self,
                 min_length: int,
                 max_length: int,
                 hard_mode: bool,
                 word_store: WordStore,
                 secret_word: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        if min_length < 1 or min_length > max_length:
            raise ArgumentError(f"Invalid length range: {min_length}..{max_length}")

        if secret_word is None:
            secret_word = word_store.random_word(min_length, max_length, rng)
        else:
            secret_word = normalize_word(secret_word)
            if not min_length <= len(secret_word) <= max_length:
                raise ArgumentError("Secret word must be between minLength and maxLength")
            if not word_store.contains(secret_word):
                raise NotInDictionaryError("Secret word must be a valid word in the dictionary")

        self.min_length = min_length
        self.max_length = max_length
        self.hard_mode = hard_mode
        self.word_store = word_store
        self._secret_word = secret_word
        self.max_attempts = self.max_attempts_for_length(len(secret_word))
        self._history: List[Attempt] = []
        self._solved = False
        self._over = False

        logger.debug("New session: length=%d hard_mode=%s max_attempts=%d",
                     len(secret_word), hard_mode, self.max_attempts)

    @property
    def secret_word(self) -> str:
        return self._secret_word

    @property
    def word_length(self) -> int:
        return len(self._secret_word)

    @property
    def history(self) -> Tuple[Attempt, ...]:
        return tuple(self._history)

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def over(self) -> bool:
        return self._over

    @property
    def status(self) -> GameStatus:
        if self._solved:
            return GameStatus.SOLVED
        if self._over:
            return GameStatus.GAME_OVER
        return GameStatus.IN_PROGRESS

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def attempts_remaining(self) -> int:
        if self._solved or self._over:
            return 0
        return self.max_attempts - len(self._history)

    def attempt(self, guess: str) -> Tuple[AttemptDetail, ...]:
        """
        Submit a guess and return per-letter feedback.

        Every check runs before any state changes, so a rejected guess
        leaves the session exactly as it was.

        Raises:
            GameOverError: The session is already solved or out of attempts
            LengthMismatchError: Guess length differs from the secret's
            NotInDictionaryError: Guess is not a dictionary word
            HardModeViolationError: Hard mode and the guess ignores a revealed hint
        """
        if self._solved:
            raise GameOverError(solved=True)
        if self._over:
            raise GameOverError(solved=False)

        normalized_guess = normalize_word(guess)
        if len(normalized_guess) != len(self._secret_word):
            raise LengthMismatchError()
        if not self.word_store.contains(normalized_guess):
            raise NotInDictionaryError(f"'{normalized_guess}' is not in the dictionary")
        if self.hard_mode:
            self._check_hard_mode(normalized_guess)

        details = evaluate(self._secret_word, normalized_guess)
        self._history.append(Attempt(normalized_guess, details))

        if normalized_guess == self._secret_word:
            self._solved = True
        elif len(self._history) >= self.max_attempts:
            self._over = True

        logger.debug("Attempt %d/%d status=%s", len(self._history), self.max_attempts, self.status.value)
        return details

    def required_hints(self) -> Tuple[Dict[int, str], Dict[str, int]]:
        """
        Hints a hard-mode guess must honour.

        Returns:
            (positions, minimum_counts): letters fixed at confirmed positions,
            and for each confirmed letter the most copies any single attempt
            proved the secret contains.
        """
        positions: Dict[int, str] = {}
        minimum_counts: Dict[str, int] = {}
        for attempt in self._history:
            confirmed = Counter()
            for index, detail in enumerate(attempt.details):
                if detail.position_correct:
                    positions[index] = detail.letter
                if detail.letter_present:
                    confirmed[detail.letter] += 1
            for letter, count in confirmed.items():
                minimum_counts[letter] = max(minimum_counts.get(letter, 0), count)
        return positions, minimum_counts

    def _check_hard_mode(self, guess: str) -> None:
        positions, minimum_counts = self.required_hints()

        for index in sorted(positions):
            if guess[index] != positions[index]:
                raise HardModeViolationError(
                    f"Hard mode: letter {index + 1} must be '{positions[index].upper()}'")

        guess_counts = Counter(guess)
        for letter in sorted(minimum_counts):
            if guess_counts[letter] < minimum_counts[letter]:
                raise HardModeViolationError(
                    f"Hard mode: guess must contain '{letter.upper()}'"
                    + (f" {minimum_counts[letter]} times" if minimum_counts[letter] > 1 else ""))

    def letter_status(self) -> Dict[str, str]:
        """
        Best evaluation seen so far for every guessed letter.

        Status can only progress in priority order: absent, present, correct.
        """
        best: Dict[str, LetterEvaluation] = {}
        for attempt in self._history:
            for detail in attempt.details:
                current = best.get(detail.letter)
                if current is None or detail.evaluation.rank > current.rank:
                    best[detail.letter] = detail.evaluation
        return {letter: evaluation.label for letter, evaluation in sorted(best.items())}

    def snapshot(self, game_id: Optional[str] = None) -> GameState:
        """State for presentation layers; the answer is only revealed once the game has ended."""
        return GameState(
            game_id=game_id,
            word_length=self.word_length,
            min_length=self.min_length,
            max_length=self.max_length,
            hard_mode=self.hard_mode,
            max_attempts=self.max_attempts,
            attempts_used=self.attempts_used,
            solved=self._solved,
            over=self._over,
            status=self.status.value,
            guesses=[attempt.guess for attempt in self._history],
            guess_results=[attempt.to_pairs() for attempt in self._history],
            letter_status=self.letter_status(),
            answer=self._secret_word if self._solved or self._over else None,
            valid_word_lengths=sorted(self.word_store.lengths()),
        )
