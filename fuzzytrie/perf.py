#!/usr/bin/env python
"""Time fuzzy searches for a stream of patterns, one per line."""

import argparse
import fileinput
import sys
import time

from tqdm import tqdm

from fuzzytrie.args import add_standard_args, get_trie_from_args
from fuzzytrie.errors import TrieError


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    add_standard_args(parser)
    parser.add_argument(
        "files",
        nargs="*",
        help="Files with one pattern per line (default: stdin).",
    )
    args = parser.parse_args()

    try:
        t = get_trie_from_args(args)
        print(f"Loaded {t.size} words ({t.num_nodes()} nodes)")

        lines = (line.strip() for line in fileinput.input(args.files))
        patterns = [line for line in lines if line]
        start_s = time.time()
        n_matches = 0
        # smoothing=0 means to show the average pace so far.
        for pattern in tqdm(patterns, smoothing=0):
            n_matches += len(t.fuzzy_search(pattern))
        elapsed_s = time.time() - start_s
    except TrieError as e:
        sys.stderr.write(f"{parser.prog}: {e}\n")
        sys.exit(1)

    rate = len(patterns) / elapsed_s if elapsed_s else float("inf")
    print(f"{n_matches} matches")
    sys.stderr.write(
        f"{len(patterns)} patterns in {elapsed_s:.2f}s = {rate:.2f} patterns/s\n"
    )


if __name__ == "__main__":
    main()
