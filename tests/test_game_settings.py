from types import SimpleNamespace

from wordmastermind.config import TestingConfig, config, get_word_statistics, max_attempts_for_length
from wordmastermind.utils.game_logger import GameLogger


def test_attempt_budget():
    assert max_attempts_for_length(3) == 6
    assert max_attempts_for_length(5) == 6
    assert max_attempts_for_length(6) == 7


def test_word_statistics():
    stats = get_word_statistics(["crane", "train"])
    assert stats['total_words'] == 2
    assert stats['avg_vowel_count'] == 2.0
    assert stats['letter_frequency']['a'] == 2
    assert stats['most_common_letters'][0][1] == 2


def test_word_statistics_empty():
    assert get_word_statistics([]) == {"error": "Word list is empty"}


def test_config_mapping():
    assert config['testing'] is TestingConfig
    assert TestingConfig.TESTING is True
    assert TestingConfig.RANDOM_SEED == 1234


def test_game_logger_writes_structured_entries(tmp_path):
    logger = GameLogger(tmp_path / "logs")
    try:
        logger.log_game_event("game-1", "game_won", "127.0.0.1", attempts_used=3)
        logger.log_error(SimpleNamespace(remote_addr="127.0.0.1"), ValueError("boom"), "submit_guess", "game-1")

        stats = logger.get_log_stats()
        assert stats['total_entries'] == 2
        assert stats['game_events'] == 1
        assert stats['errors'] == 1
    finally:
        logger.configure(None)


def test_game_logger_without_directory():
    logger = GameLogger()
    assert logger.log_file_path() is None
    assert logger.get_log_stats() == {'error': 'No log file found for today'}
