import pytest
from wordle_assist.engine import (
    LetterStatus, parse_pattern, as_pattern, format_pattern, pattern_code, all_correct,
    InvalidPattern,
)


def test_parse_pattern_basic():
    p = parse_pattern("GYB bg".replace(" ", ""))
    assert p == (LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT,
                 LetterStatus.ABSENT, LetterStatus.CORRECT)
    assert format_pattern(p) == "GYBBG"


def test_parse_pattern_strips_whitespace():
    assert parse_pattern("  bbbbb\n") == (LetterStatus.ABSENT,) * 5


@pytest.mark.parametrize("token", ["GGGG", "GGGGGG", "GGXGG", "gg-gg", "", 12345])
def test_parse_pattern_rejects(token):
    with pytest.raises(InvalidPattern):
        parse_pattern(token)


def test_invalid_pattern_is_value_error():
    with pytest.raises(ValueError):
        parse_pattern("nope!")


def test_parse_pattern_other_length():
    assert len(parse_pattern("GYBGYB", N=6)) == 6


def test_patterns_are_hashable_keys():
    d = {parse_pattern("GYBBB"): 1}
    assert d[parse_pattern("gybbb")] == 1


@pytest.mark.parametrize("token,code", [
    ("BBBBB", 0),
    ("GBBBB", 2),
    ("BGBBB", 6),
    ("YBBBB", 1),
    ("GGGGG", 242),
])
def test_pattern_code(token, code):
    assert pattern_code(parse_pattern(token)) == code


def test_all_correct_length():
    assert all_correct(7) == (LetterStatus.CORRECT,) * 7


def test_as_pattern_accepts_tokens_and_patterns():
    p = parse_pattern("GYBBG")
    assert as_pattern("gybbg") == p
    assert as_pattern(list(p)) == p


@pytest.mark.parametrize("observed", [["G"] * 5, 42, (LetterStatus.CORRECT,) * 4, "GGGG"])
def test_as_pattern_rejects(observed):
    with pytest.raises(InvalidPattern):
        as_pattern(observed)
