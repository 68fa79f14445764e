import pytest

from wordmastermind.exceptions import (
    AlreadyExistsError, ArgumentError, GameEngineError, GameNotFoundError, GameOverError,
    LengthMismatchError, NotFoundError,
)
from wordmastermind.models.dictionary_source import (
    DictionarySourceType, get_dictionary_source,
)
from wordmastermind.models.game import AttemptDetail, LetterEvaluation


class TestLetterEvaluation:
    @pytest.mark.parametrize("evaluation", list(LetterEvaluation))
    def test_label_mapping_is_bijective(self, evaluation):
        assert LetterEvaluation.from_label(evaluation.label) is evaluation

    def test_labels_are_case_insensitive(self):
        assert LetterEvaluation.from_label(" Correct ") is LetterEvaluation.CORRECT

    @pytest.mark.parametrize("label", ["green", "", "HIT", 1, None])
    def test_unknown_labels_are_rejected(self, label):
        with pytest.raises(ArgumentError):
            LetterEvaluation.from_label(label)

    def test_rank_order(self):
        assert LetterEvaluation.ABSENT.rank < LetterEvaluation.PRESENT.rank < LetterEvaluation.CORRECT.rank


class TestDictionarySource:
    def test_label_round_trip(self):
        for source_type in DictionarySourceType:
            assert DictionarySourceType.from_label(source_type.label) is source_type

    def test_unknown_label(self):
        with pytest.raises(ArgumentError):
            DictionarySourceType.from_label("klingon")

    def test_published_source(self):
        assert get_dictionary_source(DictionarySourceType.SCRABBLE).file_name == "scrabble-dictionary.dat"
        with pytest.raises(ArgumentError):
            get_dictionary_source(DictionarySourceType.CUSTOM)


class TestAttemptDetail:
    @pytest.mark.parametrize("evaluation", list(LetterEvaluation))
    def test_from_evaluation(self, evaluation):
        assert AttemptDetail.from_evaluation("a", evaluation).evaluation is evaluation

    def test_correct_implies_present(self):
        with pytest.raises(ArgumentError):
            AttemptDetail("a", position_correct=True, letter_present=False)

    def test_to_dict(self):
        detail = AttemptDetail("e", position_correct=False, letter_present=True)
        assert detail.to_dict() == {
            'letter': 'e', 'position_correct': False, 'letter_present': True, 'evaluation': 'present',
        }


class TestExceptions:
    def test_game_over_messages(self):
        assert str(GameOverError(solved=True)) == "You have already solved this word!"
        assert str(GameOverError()) == "Game Over: You have reached the maximum number of attempts."
        assert GameOverError(solved=True).to_dict() == {
            'kind': 'game_over', 'error': GameOverError.SOLVED_TEXT, 'solved': True,
        }

    def test_builtin_compatibility(self):
        assert isinstance(NotFoundError("gone", filename="x.dat"), FileNotFoundError)
        assert NotFoundError("gone", filename="x.dat").filename == "x.dat"
        assert isinstance(AlreadyExistsError(), FileExistsError)
        assert isinstance(LengthMismatchError(), ArgumentError)
        assert isinstance(ArgumentError(), ValueError)

    def test_file_errors_print_their_message(self):
        assert str(NotFoundError("File not found: x.dat", filename="x.dat")) == "File not found: x.dat"
        assert str(AlreadyExistsError("File already exists: y.dat", filename="y.dat")) == "File already exists: y.dat"
        assert str(AlreadyExistsError()) == "File already exists"

    def test_kinds_are_stable(self):
        assert LengthMismatchError().kind == "length_mismatch"
        assert GameNotFoundError().kind == "game_not_found"

    def test_game_not_found_message(self):
        error = GameNotFoundError("Game not found: abc")
        assert str(error) == "Game not found: abc"
        assert isinstance(error, GameEngineError)
        assert isinstance(error, KeyError)
