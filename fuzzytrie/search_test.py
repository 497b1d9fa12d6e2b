import sys

import pytest
from inline_snapshot import snapshot

from fuzzytrie import search


def run_search(monkeypatch, capsys, *argv):
    monkeypatch.setattr(sys, "argv", ["fuzzytrie-search", *argv])
    search.main()
    return capsys.readouterr().out


def test_search_prefix(monkeypatch, capsys):
    out = run_search(monkeypatch, capsys, "--dictionary", "testdata/words.txt", "ca")
    assert out == snapshot("car\ncart\ncat\n")


def test_search_fuzzy(monkeypatch, capsys):
    out = run_search(
        monkeypatch, capsys, "--dictionary", "testdata/words.txt", "--fuzzy", "lgrm", "ta"
    )
    assert out == snapshot("lgrm:\nalgorithm\nlogarithm\nta:\ntea\nteapot\n")


def test_search_limit(monkeypatch, capsys):
    out = run_search(
        monkeypatch, capsys, "--dictionary", "testdata/words.txt", "--limit", "1", "t"
    )
    assert out == "tea\n"


def test_search_bad_query(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_search(monkeypatch, capsys, "--dictionary", "testdata/words.txt", "Cat")
    assert exc.value.code == 1
    assert "unsupported character 'C'" in capsys.readouterr().err


def test_search_no_matches(monkeypatch, capsys):
    out = run_search(monkeypatch, capsys, "--dictionary", "testdata/words.txt", "zz")
    assert out == ""

    out = run_search(
        monkeypatch, capsys, "--dictionary", "testdata/words.txt", "--fuzzy", "zz", "ct"
    )
    assert out == snapshot("zz:\nct:\ncart\ncat\n")
