"""
Attempt Evaluator

Scores a guess against the secret word, one judgment per letter.
"""

from collections import Counter
from typing import List, Optional, Tuple

from ..exceptions import LengthMismatchError
from ..models.game import AttemptDetail, LetterEvaluation


def evaluate(secret: str, guess: str) -> Tuple[AttemptDetail, ...]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are resolved first and consume their letter, so a guessed
    letter is only reported present while the secret still has an unclaimed
    copy of it. With secret "sleep" and guess "peels" exactly two of the
    guessed e's are credited, never more.

    Raises:
        LengthMismatchError: If secret and guess differ in length
    """
    if len(secret) != len(guess):
        raise LengthMismatchError()

    result: List[Optional[LetterEvaluation]] = [None] * len(guess)
    remaining = Counter()

    # First pass: exact position matches
    for i, (secret_letter, guess_letter) in enumerate(zip(secret, guess)):
        if guess_letter == secret_letter:
            result[i] = LetterEvaluation.CORRECT
        else:
            remaining[secret_letter] += 1

    # Second pass: present letters from what the first pass left unclaimed
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterEvaluation.PRESENT
            remaining[letter] -= 1
        else:
            result[i] = LetterEvaluation.ABSENT

    return tuple(AttemptDetail.from_evaluation(letter, status) for letter, status in zip(guess, result))


def feedback_pattern(details: Tuple[AttemptDetail, ...]) -> str:
    """Compact one-character-per-letter form: C(orrect), P(resent), A(bsent)."""
    return ''.join(detail.evaluation.name[0] for detail in details)
