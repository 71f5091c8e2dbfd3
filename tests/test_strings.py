from hypothesis import given
from hypothesis import strategies as st

from gamekit.strings import split


def test_empty_text_gives_no_parts():
    assert split("", "/") == []


def test_simple_split():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_no_delimiter_gives_whole_text():
    assert split("abc", ",") == ["abc"]


def test_multi_character_delimiter():
    assert split("one::two::three", "::") == ["one", "two", "three"]


def test_trailing_delimiter_gives_empty_last_part():
    assert split("a/", "/") == ["a", ""]


def test_leading_delimiter_stays_in_first_part():
    assert split("/a", "/") == ["/a"]


def test_doubled_delimiter_keeps_second_in_next_part():
    assert split("a//b", "/") == ["a", "/b"]


@given(st.text(alphabet="ab/", min_size=1))
def test_join_restores_text(text):
    assert "/".join(split(text, "/")) == text


@given(st.text(alphabet="xy:", min_size=1))
def test_join_restores_text_with_long_delimiter(text):
    assert "::".join(split(text, "::")) == text