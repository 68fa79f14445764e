"""
Dictionary Source Models

Identifies which pre-built word list a WordStore was loaded from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..exceptions import ArgumentError


class DictionarySourceType(Enum):
    CROSSWORD = "crossword"
    SCRABBLE = "scrabble"
    ENGLISH = "english"
    CUSTOM = "custom"

    @classmethod
    def from_label(cls, label: str) -> 'DictionarySourceType':
        if not isinstance(label, str):
            raise ArgumentError(f"Dictionary source label must be a string, got {type(label).__name__}")
        try:
            return _LABEL_TO_SOURCE[label.strip().lower()]
        except KeyError:
            raise ArgumentError(f"Unknown dictionary source: '{label}'") from None

    @property
    def label(self) -> str:
        return _SOURCE_TO_LABEL[self]


_SOURCE_TO_LABEL: Dict[DictionarySourceType, str] = {
    DictionarySourceType.CROSSWORD: "crossword",
    DictionarySourceType.SCRABBLE: "scrabble",
    DictionarySourceType.ENGLISH: "english",
    DictionarySourceType.CUSTOM: "custom",
}
_LABEL_TO_SOURCE: Dict[str, DictionarySourceType] = {
    label: source for source, label in _SOURCE_TO_LABEL.items()
}


@dataclass(frozen=True)
class DictionarySource:
    """A published dictionary blob set and how to describe it to players."""
    source_type: DictionarySourceType
    file_name: str
    description: str


DICTIONARY_SOURCES: Tuple[DictionarySource, ...] = (
    DictionarySource(DictionarySourceType.CROSSWORD, "crossword-dictionary.dat", "Crossword puzzle dictionary"),
    DictionarySource(DictionarySourceType.SCRABBLE, "scrabble-dictionary.dat", "Official Scrabble word list"),
    DictionarySource(DictionarySourceType.ENGLISH, "english-dictionary.dat", "General English dictionary"),
)


def get_dictionary_source(source_type: DictionarySourceType) -> DictionarySource:
    for source in DICTIONARY_SOURCES:
        if source.source_type is source_type:
            return source
    raise ArgumentError(f"No published dictionary for source '{source_type.label}'")
