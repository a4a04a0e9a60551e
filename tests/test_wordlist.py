from pathlib import Path

import pytest

from wordchain.wordlist import load_words, output_path, write_words


def test_load_words_splits_on_whitespace(tmp_path):
    words_file = tmp_path / "words.txt"
    words_file.write_text("  apple era\n\n\telephant  \r\ntiger\n", encoding="utf-8")
    assert load_words(words_file) == ["apple", "era", "elephant", "tiger"]


def test_load_words_empty_file(tmp_path):
    words_file = tmp_path / "empty.txt"
    words_file.write_text(" \n\n", encoding="utf-8")
    assert load_words(words_file) == []


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "missing.txt")


def test_write_words(tmp_path):
    out = tmp_path / "out" / "chain.txt"
    write_words(out, ["apple", "éra"])
    assert out.read_text(encoding="utf-8") == "apple\néra"


def test_write_no_words(tmp_path):
    out = tmp_path / "chain.txt"
    write_words(out, [])
    assert out.read_text(encoding="utf-8") == ""


def test_output_path():
    assert output_path("data/words.txt", "circuit") == Path("data/words-circuit.txt")
    assert output_path("words.txt", "--circular") == Path("words-circular.txt")
