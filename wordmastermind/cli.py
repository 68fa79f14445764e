"""
Dictionary Build Tool

Turns a raw word list into binary dictionary blobs and inspects them.

Usage:
    wordmastermind-dict build words.json scrabble-dictionary.dat
    wordmastermind-dict build words.txt scrabble-dictionary.dat --split
    wordmastermind-dict build words.txt five.dat --length 5
    wordmastermind-dict info scrabble-dictionary.dat
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config.game_settings import get_word_statistics
from .exceptions import GameEngineError
from .models.dictionary_source import DictionarySourceType
from .models.word_store import WordStore


def load_word_list(input_path: str, source_type: DictionarySourceType) -> WordStore:
    """Read a .json word list, otherwise one word per line."""
    if Path(input_path).suffix.lower() == '.json':
        return WordStore.from_json_file(input_path, source_type=source_type)
    return WordStore.from_text_file(input_path, source_type=source_type)


def build(args: argparse.Namespace) -> int:
    store = load_word_list(args.input, DictionarySourceType.from_label(args.source))

    if args.split:
        written = store.split_serialize(args.output)
        print(f"Wrote {written} words into {len(store.lengths())} blobs for {args.output}")
    else:
        written = store.serialize(args.output, args.length)
        print(f"Wrote {written} words to {args.output}")
    return 0


def info(args: argparse.Namespace) -> int:
    store = WordStore.load_split(args.blob) if args.split else WordStore.load(args.blob)

    print(f"Dictionary: {args.blob}")
    print(f"Total words: {store.word_count()}")
    for length in sorted(store.lengths()):
        print(f"  {length:>3} letters: {store.word_count(length)}")

    stats = get_word_statistics(store)
    if 'error' not in stats:
        print(f"Average vowels per word: {stats['avg_vowel_count']}")
        common = ', '.join(f"{letter}={count}" for letter, count in stats['most_common_letters'])
        print(f"Most common letters: {common}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordmastermind-dict',
        description='Build and inspect binary word dictionaries.'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    build_parser_ = subparsers.add_parser('build', help='Serialize a word list into binary blobs')
    build_parser_.add_argument('input', help='Word list (.json array/object or one word per line)')
    build_parser_.add_argument('output', help='Output blob path (or base name with --split)')
    build_parser_.add_argument('--length', type=int, default=None, help='Only write words of this length')
    build_parser_.add_argument('--split', action='store_true', help='Write one blob per length plus a manifest')
    build_parser_.add_argument('--source', default=DictionarySourceType.CUSTOM.label,
                               choices=[source.label for source in DictionarySourceType],
                               help='Dictionary source type')
    build_parser_.set_defaults(handler=build)

    info_parser = subparsers.add_parser('info', help='Summarize a binary blob')
    info_parser.add_argument('blob', help='Blob path (or base name with --split)')
    info_parser.add_argument('--split', action='store_true', help='Read a split blob set via its manifest')
    info_parser.set_defaults(handler=info)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, 'split', False) and getattr(args, 'length', None) is not None:
        parser.error('--length cannot be combined with --split')

    try:
        return args.handler(args)
    except GameEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
