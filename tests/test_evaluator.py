from collections import Counter
from itertools import product

import pytest

from wordmastermind.exceptions import LengthMismatchError
from wordmastermind.models.game import LetterEvaluation
from wordmastermind.services.evaluator import evaluate, feedback_pattern


def test_exact_guess_is_all_correct():
    details = evaluate("crane", "crane")
    assert len(details) == 5
    assert all(detail.position_correct and detail.letter_present for detail in details)
    assert [detail.letter for detail in details] == list("crane")


def test_duplicate_letters_are_not_over_credited():
    details = evaluate("sleep", "peels")
    assert feedback_pattern(details) == "PPCPP"

    e_hits = [detail for detail in details if detail.letter == "e" and detail.letter_present]
    assert len(e_hits) == 2


def test_single_secret_letter_credits_one_guess_letter():
    # The exact match claims the only "e", leaving the other two absent
    details = evaluate("crane", "eerie")
    assert feedback_pattern(details) == "AAPAC"


def test_exact_matches_take_priority_over_earlier_present_letters():
    details = evaluate("naval", "aaaaa")
    assert [detail.evaluation for detail in details] == [
        LetterEvaluation.ABSENT,
        LetterEvaluation.CORRECT,
        LetterEvaluation.ABSENT,
        LetterEvaluation.CORRECT,
        LetterEvaluation.ABSENT,
    ]


def test_present_but_misplaced():
    details = evaluate("crane", "nacre")
    assert feedback_pattern(details) == "PPPPC"


def test_absent_letters():
    details = evaluate("crane", "humph")
    assert feedback_pattern(details) == "AAAAA"
    assert not any(detail.letter_present for detail in details)


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        evaluate("crane", "cat")


def test_credited_letters_never_exceed_secret_counts(word_store):
    for secret, guess in product(word_store.words(5), repeat=2):
        details = evaluate(secret, guess)
        secret_counts = Counter(secret)
        guess_counts = Counter(guess)
        credited = Counter(detail.letter for detail in details if detail.letter_present)

        for letter in guess_counts:
            assert credited[letter] == min(guess_counts[letter], secret_counts[letter]), (secret, guess)
        for index, detail in enumerate(details):
            assert detail.position_correct == (secret[index] == guess[index])
