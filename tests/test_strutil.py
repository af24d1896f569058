import pytest

from cloudisk.strutil import split_string


def test_splits_command_and_argument():
    assert split_string("ls dir", " ", 10) == ["ls", "dir"]


def test_consecutive_delimiters_are_skipped():
    assert split_string("  cd   docs  ", " ", 10) == ["cd", "docs"]


def test_token_limit_is_one_less_than_max():
    assert split_string("a b c d", " ", 3) == ["a", "b"]


def test_max_tokens_of_one_returns_nothing():
    assert split_string("a b", " ", 1) == []


def test_delimiter_is_a_set_of_characters():
    assert split_string("a=b;c", "=;", 10) == ["a", "b", "c"]


def test_empty_text_gives_no_tokens():
    assert split_string("", " ", 10) == []


def test_only_delimiters_gives_no_tokens():
    assert split_string("====", "=", 10) == []


def test_empty_delimiter_keeps_text_whole():
    assert split_string("puts file.txt", "", 10) == ["puts file.txt"]


def test_regex_characters_in_delimiter_are_literal():
    assert split_string("x.y]z", ".]", 10) == ["x", "y", "z"]


@pytest.mark.parametrize("bad", [0, -1])
def test_invalid_max_tokens(bad):
    with pytest.raises(ValueError):
        split_string("a b", " ", bad)


def test_joined_tokens_contain_no_delimiter():
    tokens = split_string("one two  three four", " ", 100)
    assert all(" " not in token for token in tokens)
    assert " ".join(tokens) == "one two three four"