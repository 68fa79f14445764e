"""
Word Store

Length-partitioned dictionary of valid words, with membership checks,
random word selection and a compact binary on-disk format.
"""

import io
import json
import logging
import random
from pathlib import Path
from typing import BinaryIO, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from ..config.game_settings import SPLIT_MANIFEST_SUFFIX
from ..exceptions import AlreadyExistsError, ArgumentError, CorruptDataError, EmptyRangeError, NotFoundError
from ..utils.binary_io import read_int32, read_string, write_int32, write_string
from .dictionary_source import DictionarySourceType

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def normalize_word(word: str) -> str:
    return word.strip().lower()


class WordStore:
    """
    Immutable set of dictionary words, bucketed by word length.

    Buckets are kept in ascending length order and preserve first-seen
    word order, so serialization is deterministic. A single store is safe
    to share read-only between any number of game sessions.
    """

    def __init__(self,
                 words_by_length: Mapping[int, Iterable[str]],
                 source_type: DictionarySourceType = DictionarySourceType.CUSTOM,
                 description: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        buckets: Dict[int, Tuple[str, ...]] = {}
        for length in sorted(words_by_length):
            if not isinstance(length, int) or isinstance(length, bool) or length < 1:
                raise ArgumentError(f"Word length must be a positive integer, got {length!r}")

            # dict keeps first-seen order while dropping duplicates
            bucket: Dict[str, None] = {}
            for word in words_by_length[length]:
                normalized = normalize_word(word)
                if len(normalized) != length:
                    raise ArgumentError(f"Word '{normalized}' does not have {length} letters")
                bucket[normalized] = None

            if bucket:
                buckets[length] = tuple(bucket)

        self._words_by_length = buckets
        self._lookup: Dict[int, FrozenSet[str]] = {
            length: frozenset(words) for length, words in buckets.items()
        }
        self.source_type = source_type
        self.description = description
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_words(cls, words: Iterable[str], **kwargs) -> 'WordStore':
        """Build a store from a flat word list, grouping by length. Blank entries are skipped."""
        grouped: Dict[int, List[str]] = {}
        for word in words:
            if not isinstance(word, str):
                raise ArgumentError(f"Words must be strings, got {type(word).__name__}")
            normalized = normalize_word(word)
            if normalized:
                grouped.setdefault(len(normalized), []).append(normalized)
        return cls(grouped, **kwargs)

    @classmethod
    def from_json_file(cls, path: PathLike, **kwargs) -> 'WordStore':
        """
        Load a word list from a JSON file.

        Accepts either an array of words or an object whose keys are the
        words (the shape of the published scrabble dictionary).

        Raises:
            NotFoundError: If the file does not exist
            CorruptDataError: If the file is not valid JSON of either shape
        """
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"Word list file not found: {path}", filename=str(path))

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CorruptDataError(f"Invalid JSON in {path}: {e}") from e

        if isinstance(data, dict):
            data = list(data.keys())
        if not isinstance(data, list):
            raise CorruptDataError(f"{path} must contain an array of words")

        logger.debug("Loaded %d raw words from %s", len(data), path)
        return cls.from_words(data, **kwargs)

    @classmethod
    def from_text_file(cls, path: PathLike, **kwargs) -> 'WordStore':
        """Load a word list with one word per line."""
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"Word list file not found: {path}", filename=str(path))

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return cls.from_words(f, **kwargs)
        except UnicodeDecodeError as e:
            raise CorruptDataError(f"{path} is not valid UTF-8: {e}") from e

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, word: str) -> bool:
        if not isinstance(word, str):
            return False
        normalized = normalize_word(word)
        bucket = self._lookup.get(len(normalized))
        return bucket is not None and normalized in bucket

    __contains__ = contains

    def lengths(self) -> FrozenSet[int]:
        """Word lengths with at least one word (the valid word lengths)."""
        return frozenset(self._words_by_length)

    def words(self, length: int) -> Tuple[str, ...]:
        return self._words_by_length.get(length, ())

    def words_in_range(self, min_length: int, max_length: int) -> List[str]:
        return [
            word
            for length, bucket in self._words_by_length.items()
            if min_length <= length <= max_length
            for word in bucket
        ]

    def word_count(self, length: Optional[int] = None) -> int:
        if length is not None:
            return len(self.words(length))
        return sum(len(bucket) for bucket in self._words_by_length.values())

    def __len__(self) -> int:
        return self.word_count()

    def __iter__(self):
        for bucket in self._words_by_length.values():
            yield from bucket

    def as_dict(self) -> Dict[int, Tuple[str, ...]]:
        return dict(self._words_by_length)

    def random_word(self, min_length: int, max_length: int, rng: Optional[random.Random] = None) -> str:
        """
        Pick a random word whose length lies in [min_length, max_length].

        Every word in range is equally likely, so lengths with more words
        are drawn proportionally more often.

        Raises:
            EmptyRangeError: If no word has a length in the range
        """
        rng = rng or self._rng
        in_range = [
            bucket for length, bucket in self._words_by_length.items()
            if min_length <= length <= max_length
        ]
        total = sum(len(bucket) for bucket in in_range)
        if total == 0:
            raise EmptyRangeError(f"No words with length between {min_length} and {max_length}")

        index = rng.randrange(total)
        for bucket in in_range:
            if index < len(bucket):
                return bucket[index]
            index -= len(bucket)
        raise AssertionError("index outside of word range")  # unreachable

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _write(self, stream: BinaryIO, target_length: Optional[int] = None) -> int:
        if target_length is not None and target_length not in self._words_by_length:
            raise ArgumentError(f"No words of length {target_length}")

        buckets = self._words_by_length
        if target_length is not None:
            buckets = {target_length: buckets[target_length]}

        word_count = 0
        write_int32(stream, len(buckets))
        for length, words in buckets.items():
            write_int32(stream, length)
            write_int32(stream, len(words))
            for word in words:
                write_string(stream, word)
                word_count += 1
        return word_count

    def to_bytes(self, target_length: Optional[int] = None) -> bytes:
        buffer = io.BytesIO()
        self._write(buffer, target_length)
        return buffer.getvalue()

    def serialize(self, output_path: PathLike, target_length: Optional[int] = None) -> int:
        """
        Save the dictionary (or a single length bucket) to a binary file.

        Returns:
            int: Number of words written

        Raises:
            AlreadyExistsError: If output_path already exists
            ArgumentError: If target_length is given but has no words
        """
        output_path = Path(output_path)
        if output_path.exists():
            raise AlreadyExistsError(f"File already exists: {output_path}", filename=str(output_path))

        data = self.to_bytes(target_length)
        try:
            with open(output_path, 'xb') as f:
                f.write(data)
        except FileExistsError as e:
            raise AlreadyExistsError(f"File already exists: {output_path}", filename=str(output_path)) from e

        word_count = self.word_count(target_length)
        logger.debug("Serialized %d words to %s", word_count, output_path)
        return word_count

    @staticmethod
    def split_paths(output_path: PathLike, lengths: Iterable[int]) -> Tuple[Dict[int, Path], Path]:
        """Per-length blob paths and the manifest path for a split blob set."""
        output_path = Path(output_path)
        blobs = {length: output_path.with_name(f"{length}-{output_path.name}") for length in lengths}
        manifest = output_path.with_name(f"{output_path.name}{SPLIT_MANIFEST_SUFFIX}")
        return blobs, manifest

    def split_serialize(self, output_path: PathLike) -> int:
        """
        Write one blob per word length plus a JSON manifest of the lengths.

        Nothing is written if any destination already exists.

        Returns:
            int: Total number of words written across all blobs
        """
        lengths = list(self._words_by_length)
        blobs, manifest = self.split_paths(output_path, lengths)
        for path in list(blobs.values()) + [manifest]:
            if path.exists():
                raise AlreadyExistsError(f"File already exists: {path}", filename=str(path))

        total = sum(self.serialize(blobs[length], length) for length in lengths)

        with open(manifest, 'w', encoding='utf-8') as f:
            json.dump(lengths, f)

        logger.debug("Split %d words into %d blobs", total, len(lengths))
        return total

    @staticmethod
    def open_for_read(path: PathLike) -> BinaryIO:
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"File not found: {path}", filename=str(path))
        return open(path, 'rb')

    @staticmethod
    def deserialize_to_dict(data: Union[bytes, bytearray, BinaryIO]) -> Dict[int, List[str]]:
        """
        Decode a binary blob into a length -> words mapping.

        Raises:
            CorruptDataError: If the data is truncated or inconsistent
        """
        stream = io.BytesIO(data) if isinstance(data, (bytes, bytearray)) else data

        bucket_count = read_int32(stream, "bucket count")
        if bucket_count < 0:
            raise CorruptDataError(f"Negative bucket count: {bucket_count}")

        dictionary: Dict[int, List[str]] = {}
        for _ in range(bucket_count):
            length = read_int32(stream, "word length")
            word_count = read_int32(stream, "word count")
            if length < 1:
                raise CorruptDataError(f"Invalid word length: {length}")
            if word_count < 0:
                raise CorruptDataError(f"Negative word count for length {length}: {word_count}")
            if length in dictionary:
                raise CorruptDataError(f"Duplicate bucket for length {length}")

            words = []
            for _ in range(word_count):
                word = read_string(stream)
                if len(normalize_word(word)) != length:
                    raise CorruptDataError(f"Word '{word}' found in bucket for length {length}")
                words.append(word)
            dictionary[length] = words

        return dictionary

    @classmethod
    def deserialize(cls, data: Union[bytes, bytearray, BinaryIO], **kwargs) -> 'WordStore':
        return cls(cls.deserialize_to_dict(data), **kwargs)

    @classmethod
    def load(cls, path: PathLike, **kwargs) -> 'WordStore':
        """Open and deserialize a single blob file."""
        with cls.open_for_read(path) as stream:
            store = cls.deserialize(stream, **kwargs)
        logger.info("Loaded dictionary %s: %d words, lengths %s",
                    path, store.word_count(), sorted(store.lengths()))
        return store

    @classmethod
    def load_split(cls, output_path: PathLike, lengths: Optional[Iterable[int]] = None, **kwargs) -> 'WordStore':
        """
        Re-assemble a store from a split blob set.

        Args:
            output_path: The name the set was split under
            lengths: Only load these lengths (default: every length in the manifest)
        """
        _, manifest = cls.split_paths(output_path, ())
        with cls.open_for_read(manifest) as f:
            try:
                available = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise CorruptDataError(f"Invalid manifest {manifest}: {e}") from e
        if not isinstance(available, list) or not all(isinstance(n, int) for n in available):
            raise CorruptDataError(f"Manifest {manifest} must be an array of lengths")

        wanted = available if lengths is None else [n for n in lengths if n in available]
        blobs, _ = cls.split_paths(output_path, wanted)

        merged: Dict[int, List[str]] = {}
        for length, path in blobs.items():
            with cls.open_for_read(path) as stream:
                part = cls.deserialize_to_dict(stream)
            if set(part) - {length}:
                raise CorruptDataError(f"Blob {path} holds lengths {sorted(part)}, expected {length}")
            merged.update(part)

        return cls(merged, **kwargs)

    def __repr__(self) -> str:
        return f"<WordStore {self.source_type.label} words={self.word_count()} lengths={sorted(self.lengths())}>"
