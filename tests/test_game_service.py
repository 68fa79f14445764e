import pytest

from wordmastermind.exceptions import GameNotFoundError, NotInDictionaryError
from wordmastermind.services.game_service import GameService, get_game_service, initialize_game_service


def test_create_and_play_game(word_store):
    service = GameService(word_store)
    game_id = service.create_new_game(secret_word="crane")

    state = service.get_game_state(game_id)
    assert state.game_id == game_id
    assert state.word_length == 5
    assert state.answer is None

    details, state = service.make_guess(game_id, "crane")
    assert all(detail.position_correct for detail in details)
    assert state.solved
    assert state.answer == "crane"


def test_defaults_apply_to_random_games(word_store):
    service = GameService(word_store, default_min_length=3, default_max_length=4, default_hard_mode=True)
    session = service.get_session(service.create_new_game())
    assert 3 <= session.word_length <= 4
    assert session.hard_mode


def test_seeded_services_pick_the_same_secrets(word_store):
    first = GameService(word_store, default_min_length=3, default_max_length=8, seed=11)
    second = GameService(word_store, default_min_length=3, default_max_length=8, seed=11)
    for _ in range(5):
        a = first.get_session(first.create_new_game()).secret_word
        b = second.get_session(second.create_new_game()).secret_word
        assert a == b


def test_sessions_are_independent(word_store):
    service = GameService(word_store)
    first = service.create_new_game(secret_word="crane")
    second = service.create_new_game(secret_word="crane")
    assert first != second

    service.make_guess(first, "crane")
    assert service.get_game_state(first).solved
    assert not service.get_game_state(second).solved
    assert service.get_session(first).word_store is service.get_session(second).word_store


def test_engine_errors_propagate(word_store):
    service = GameService(word_store)
    game_id = service.create_new_game(secret_word="crane")
    with pytest.raises(NotInDictionaryError):
        service.make_guess(game_id, "zzzzz")
    assert service.get_game_state(game_id).attempts_used == 0


def test_unknown_game(word_store):
    service = GameService(word_store)
    with pytest.raises(GameNotFoundError, match="Game not found"):
        service.get_game_state("missing")
    with pytest.raises(KeyError):
        service.make_guess("missing", "crane")


def test_delete_game(word_store):
    service = GameService(word_store)
    game_id = service.create_new_game()
    assert service.active_game_count() == 1
    assert service.delete_game(game_id) is True
    assert service.delete_game(game_id) is False
    assert service.active_game_count() == 0


def test_valid_word_lengths(word_store):
    assert GameService(word_store).valid_word_lengths() == [3, 4, 5, 6, 7, 8]


def test_global_service(game_service):
    assert get_game_service() is game_service


def test_initialize_replaces_global(word_store, game_service):
    replacement = initialize_game_service(word_store, default_min_length=3, default_max_length=3)
    assert get_game_service() is replacement
    assert replacement is not game_service
