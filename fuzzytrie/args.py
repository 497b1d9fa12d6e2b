"""Standard command-line arguments shared across the tools."""

import argparse

from fuzzytrie.trie import Trie, make_trie


def add_standard_args(parser: argparse.ArgumentParser, *, progress=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/words.txt",
        help="Path to dictionary file with one lowercase word per line.",
    )
    if progress:
        parser.add_argument(
            "--progress",
            action="store_true",
            help="Show a progress bar while loading the dictionary.",
        )


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    t = make_trie(args.dictionary, progress=getattr(args, "progress", False))
    assert t.size > 0, f"No words in {args.dictionary}"
    return t
