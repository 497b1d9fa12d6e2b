import sys

from inline_snapshot import snapshot

from fuzzytrie import make_dict
from fuzzytrie.make_dict import normalize_word


def test_normalize_word():
    assert normalize_word("apple\n") == "apple"
    assert normalize_word("  Apple  ") == "apple"
    assert normalize_word("\n") is None
    assert normalize_word("don't") is None
    assert normalize_word("café") is None
    assert normalize_word("x1") is None
    assert normalize_word("ice cream") is None


def test_main(monkeypatch, capsys, tmp_path):
    extra = tmp_path / "extra.txt"
    extra.write_text("Apple\nbanana\n\nice cream\n")
    monkeypatch.setattr(
        sys, "argv", ["fuzzytrie-make-dict", "testdata/bad-words.txt", str(extra)]
    )
    make_dict.main()
    out = capsys.readouterr().out
    assert out == snapshot("apple\napply\nape\norange\nbanana\n")
