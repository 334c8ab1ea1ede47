from hypothesis import given
from hypothesis import strategies as st

from algoritma.wildcard import wildcard_match

plain_text = st.text(alphabet="ab", max_size=12)


def test_source_case():
    assert wildcard_match("baaabab", "*****ba*****ab")


def test_empty_pattern_matches_only_empty_text():
    assert wildcard_match("", "")
    assert not wildcard_match("a", "")


def test_stars_match_empty_text():
    assert wildcard_match("", "***")


def test_literal_mismatch():
    assert not wildcard_match("baaabab", "a*")


@given(plain_text)
def test_text_matches_itself(text):
    assert wildcard_match(text, text)


@given(plain_text)
def test_star_matches_everything(text):
    assert wildcard_match(text, "*")


@given(plain_text)
def test_question_marks_match_by_length(text):
    assert wildcard_match(text, "?" * len(text))
    assert not wildcard_match(text, "?" * (len(text) + 1))


@given(plain_text, plain_text)
def test_prefix_star(prefix, rest):
    assert wildcard_match(prefix + rest, prefix + "*")


@given(plain_text, plain_text)
def test_star_between_parts(head, tail):
    assert wildcard_match(head + "ab" + tail, head + "*" + tail)