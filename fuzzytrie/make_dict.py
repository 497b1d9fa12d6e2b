#!/usr/bin/env python
"""Filter a word list to just the words a Trie accepts (lowercase a-z)."""

import fileinput


def normalize_word(word: str) -> str | None:
    word = word.strip().lower()
    if not word:
        return None
    for let in word:
        if let < "a" or let > "z":
            return None
    return word


def main():
    seen = set()
    for line in fileinput.input():
        word = normalize_word(line)
        if word and word not in seen:
            seen.add(word)
            print(word)


if __name__ == "__main__":
    main()
