"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..exceptions import ArgumentError


class LetterEvaluation(Enum):
    """Per-letter feedback for one position of an attempt."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @classmethod
    def from_label(cls, label: str) -> 'LetterEvaluation':
        """Parse the external string form, rejecting unknown labels."""
        if not isinstance(label, str):
            raise ArgumentError(f"Letter evaluation label must be a string, got {type(label).__name__}")
        try:
            return _LABEL_TO_EVALUATION[label.strip().lower()]
        except KeyError:
            raise ArgumentError(f"Unknown letter evaluation: '{label}'") from None

    @property
    def label(self) -> str:
        return _EVALUATION_TO_LABEL[self]

    @property
    def rank(self) -> int:
        """Ordering used for keyboard summaries: correct beats present beats absent."""
        return _EVALUATION_RANK[self]


_EVALUATION_TO_LABEL: Dict[LetterEvaluation, str] = {
    LetterEvaluation.CORRECT: "correct",
    LetterEvaluation.PRESENT: "present",
    LetterEvaluation.ABSENT: "absent",
}
_LABEL_TO_EVALUATION: Dict[str, LetterEvaluation] = {
    label: evaluation for evaluation, label in _EVALUATION_TO_LABEL.items()
}
_EVALUATION_RANK: Dict[LetterEvaluation, int] = {
    LetterEvaluation.ABSENT: 0,
    LetterEvaluation.PRESENT: 1,
    LetterEvaluation.CORRECT: 2,
}


class GameStatus(Enum):
    """Session lifecycle. SOLVED and GAME_OVER are terminal."""
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class AttemptDetail:
    """Judgment for a single letter position of a guess."""
    letter: str
    position_correct: bool
    letter_present: bool

    def __post_init__(self):
        if self.position_correct and not self.letter_present:
            raise ArgumentError("A position-correct letter must also be letter-present")

    @property
    def evaluation(self) -> LetterEvaluation:
        if self.position_correct:
            return LetterEvaluation.CORRECT
        if self.letter_present:
            return LetterEvaluation.PRESENT
        return LetterEvaluation.ABSENT

    @classmethod
    def from_evaluation(cls, letter: str, evaluation: LetterEvaluation) -> 'AttemptDetail':
        return cls(
            letter=letter,
            position_correct=evaluation is LetterEvaluation.CORRECT,
            letter_present=evaluation is not LetterEvaluation.ABSENT,
        )

    def to_dict(self) -> Dict:
        return {
            'letter': self.letter,
            'position_correct': self.position_correct,
            'letter_present': self.letter_present,
            'evaluation': self.evaluation.label,
        }


@dataclass(frozen=True)
class Attempt:
    """One entry of a session's history."""
    guess: str
    details: Tuple[AttemptDetail, ...]

    @property
    def solved(self) -> bool:
        return all(detail.position_correct for detail in self.details)

    def to_pairs(self) -> List[Tuple[str, str]]:
        # Letter status as string for JSON serialization
        return [(detail.letter, detail.evaluation.label) for detail in self.details]


@dataclass
class GameState:
    """Read-only snapshot of a session handed to presentation layers."""
    word_length: int
    min_length: int
    max_length: int
    hard_mode: bool
    max_attempts: int
    attempts_used: int
    solved: bool
    over: bool
    status: str
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
    game_id: Optional[str] = None
    valid_word_lengths: List[int] = field(default_factory=list)
