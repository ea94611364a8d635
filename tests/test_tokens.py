import pytest

from sysdemos.tokens import main, tokenize


def test_source_example():
    assert tokenize("a:;22:;33", ":;") == ["a", "22", "33"]


def test_leading_and_trailing_delimiters_skipped():
    assert tokenize(";;a::b;", ":;") == ["a", "b"]


def test_only_delimiters_gives_nothing():
    assert tokenize(":;:;", ":;") == []
    assert tokenize("", ":;") == []


def test_empty_delimiter_set_returns_whole_text():
    assert tokenize("abc", "") == ["abc"]


@pytest.mark.parametrize("delims", ["]", "^", "-", "\\", ".*"])
def test_regex_special_characters_are_literal(delims):
    text = delims.join(["x", "y", "z"])
    assert tokenize(text, delims) == ["x", "y", "z"]


def test_tokens_never_contain_delimiters():
    tokens = tokenize("one, two;three ,,four", ",; ")
    assert tokens == ["one", "two", "three", "four"]
    assert all(not set(t) & set(",; ") for t in tokens)


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["a", "22", "33"]


def test_main_arguments(capsys):
    assert main(["p-q--r", "-"]) == 0
    assert capsys.readouterr().out.splitlines() == ["p", "q", "r"]


def test_main_too_many_arguments():
    assert main(["a", "b", "c"]) == 2