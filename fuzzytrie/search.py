#!/usr/bin/env python
"""Look up words in a dictionary by prefix or by fuzzy (subsequence) match.

    $ fuzzytrie-search --fuzzy lgrm
    algorithm
    logarithm
"""

import argparse
import logging
import sys
import time

from fuzzytrie.args import add_standard_args, get_trie_from_args
from fuzzytrie.errors import TrieError


def main():
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[0])
    add_standard_args(parser, progress=True)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--prefix",
        dest="mode",
        action="store_const",
        const="prefix",
        help="List words that start with each query (default).",
    )
    mode.add_argument(
        "--fuzzy",
        dest="mode",
        action="store_const",
        const="fuzzy",
        help="List words that contain each query's letters in order.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Print at most this many matches per query (0 for no limit).",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debugging information."
    )
    parser.add_argument("queries", nargs="+", help="Prefixes or fuzzy patterns.")
    args = parser.parse_args()
    assert args.limit >= 0

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        start_s = time.time()
        t = get_trie_from_args(args)
        sys.stderr.write(
            f"Loaded {t.size} words in {time.time() - start_s:.02f}s\n"
        )

        for query in args.queries:
            if args.mode == "fuzzy":
                matches = t.fuzzy_search(query)
            else:
                matches = sorted(t.prefix_search(query))
            if args.limit:
                matches = matches[: args.limit]
            if len(args.queries) > 1:
                print(f"{query}:")
            if matches:
                print("\n".join(matches))
    except TrieError as e:
        sys.stderr.write(f"{parser.prog}: {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
