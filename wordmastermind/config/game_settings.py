"""
Game Configuration Constants Module

This module defines the game rule constants. All game parameters are
centralized here to enable easy modification.
"""

from typing import Dict, Final, Iterable

BASE_MAX_ATTEMPTS: Final[int] = 6
"""
Attempt budget for words of five letters or fewer.
Longer secret words get one attempt more than their length.
"""

DEFAULT_MIN_WORD_LENGTH: Final[int] = 5
DEFAULT_MAX_WORD_LENGTH: Final[int] = 5

SPLIT_MANIFEST_SUFFIX: Final[str] = "-lengths.json"
"""Suffix of the JSON table of contents written next to split blobs."""

VOWELS: Final[frozenset] = frozenset('aeiou')


def max_attempts_for_length(length: int) -> int:
    """
    Attempt budget for a secret word of the given length.

    Deterministic and non-decreasing in ``length``.
    """
    return max(BASE_MAX_ATTEMPTS, length + 1)


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    total_vowels = sum(len([char for char in word if char in VOWELS]) for word in words)

    # Calculate letter frequency distribution
    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
