import random

import pytest

from wordmastermind import create_app
from wordmastermind.config import TestingConfig
from wordmastermind.models.word_store import WordStore
from wordmastermind.services import game_service as game_service_module
from wordmastermind.services.game_service import initialize_game_service

FIVE_LETTER_WORDS = [
    "crane", "train", "slate", "grade", "sleep", "peels", "serve", "cigar",
    "rebut", "sissy", "humph", "awake", "blush", "focal", "evade", "naval",
    "heath", "dwarf", "model", "karma", "stink", "quiet", "bench", "abate",
]
OTHER_WORDS = ["cat", "dog", "sun", "tree", "wolf", "bear", "planet", "forest", "kitchen", "elephant"]


@pytest.fixture
def words():
    return FIVE_LETTER_WORDS + OTHER_WORDS


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def word_store(words):
    return WordStore.from_words(words, rng=random.Random(7))


@pytest.fixture
def game_service(word_store):
    service = initialize_game_service(word_store, seed=1)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(game_service, tmp_path):
    class Config(TestingConfig):
        LOG_DIR = str(tmp_path / "logs")

    return create_app(Config)


@pytest.fixture
def client(app):
    return app.test_client()
