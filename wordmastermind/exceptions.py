"""
Engine Exceptions

Every error the engine raises derives from GameEngineError and carries a
stable ``kind`` string that presentation layers map to user-facing text.
"""

from typing import Optional


class GameEngineError(Exception):
    """Base class for all game engine errors."""

    kind: str = "engine"
    default_message: str = "Game engine error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        # OSError and KeyError bases would otherwise format their own args
        return self.message

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'error': self.message}


class NotFoundError(GameEngineError, FileNotFoundError):
    """Source dictionary does not exist."""
    kind = "not_found"
    default_message = "File not found"

    def __init__(self, message: Optional[str] = None, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class AlreadyExistsError(GameEngineError, FileExistsError):
    """Refusing to overwrite an existing output file."""
    kind = "already_exists"
    default_message = "File already exists"

    def __init__(self, message: Optional[str] = None, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class CorruptDataError(GameEngineError, ValueError):
    """Binary dictionary blob is truncated or malformed."""
    kind = "corrupt_data"
    default_message = "Dictionary data is corrupt"


class EmptyRangeError(GameEngineError, ValueError):
    """No dictionary words in the requested length range."""
    kind = "empty_range"
    default_message = "No words available in the requested length range"


class ArgumentError(GameEngineError, ValueError):
    """Invalid parameters."""
    kind = "argument"
    default_message = "Invalid argument"


class NotInDictionaryError(GameEngineError, ValueError):
    kind = "not_in_dictionary"
    default_message = "Word is not in the dictionary"


class LengthMismatchError(ArgumentError):
    kind = "length_mismatch"
    default_message = "Word length does not match secret word length"


class HardModeViolationError(GameEngineError):
    """Guess ignores hints confirmed by earlier attempts."""
    kind = "hard_mode_violation"
    default_message = "Hard mode: guess must use all revealed hints"


class GameOverError(GameEngineError):
    """
    Raised on any attempt after the session reached a terminal state.

    ``solved`` distinguishes "already won" from "ran out of attempts".
    """
    kind = "game_over"
    SOLVED_TEXT = "You have already solved this word!"
    GAME_OVER_TEXT = "Game Over: You have reached the maximum number of attempts."

    def __init__(self, solved: bool = False):
        super().__init__(self.SOLVED_TEXT if solved else self.GAME_OVER_TEXT)
        self.solved = solved

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['solved'] = self.solved
        return data


class GameNotFoundError(GameEngineError, KeyError):
    kind = "game_not_found"
    default_message = "Game not found"
