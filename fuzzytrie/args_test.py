import argparse

import pytest

from fuzzytrie.args import add_standard_args, get_trie_from_args
from fuzzytrie.errors import LoadError


def test_standard_args():
    parser = argparse.ArgumentParser()
    add_standard_args(parser)
    args = parser.parse_args([])
    assert args.dictionary == "wordlists/words.txt"
    assert not hasattr(args, "progress")

    parser = argparse.ArgumentParser()
    add_standard_args(parser, progress=True)
    args = parser.parse_args(["--dictionary", "testdata/words.txt", "--progress"])
    assert args.dictionary == "testdata/words.txt"
    assert args.progress


def test_get_trie_from_args():
    parser = argparse.ArgumentParser()
    add_standard_args(parser)
    args = parser.parse_args(["--dictionary", "testdata/words.txt"])
    t = get_trie_from_args(args)
    assert t.size == 11
    assert "teapot" in t

    args = parser.parse_args(["--dictionary", "testdata/missing.txt"])
    with pytest.raises(LoadError):
        get_trie_from_args(args)
