import pytest

from dice_keypad.errors import DiceError
from dice_keypad.models import ParseFailure
from dice_keypad.parser import parse, parse_terms


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("", "empty input"),
        ("   ", "empty input"),
        ("invalid", "could not understand 'invalid'"),
        ("d6", "could not understand 'd6'"),
        ("3d", "could not understand '3d'"),
        ("3x6", "could not understand '3x6'"),
        ("3d6+2", "could not understand '3d6+2'"),
        ("-3d6", "could not understand '-3d6'"),
        ("0d6", "dice count must be at least 1"),
        ("3d0", "dice need at least 1 side"),
        ("1001d6", "too many dice"),
        ("1d1000001", "too many sides"),
        ("1d" + "9" * 5000, "sides in"),
        (" ".join(["1000d6"] * 11), "too many dice in total (max 10000)"),
    ],
)
def test_parse_rejections(text, reason):
    parsed = parse(text)
    assert not parsed.ok
    assert isinstance(parsed, ParseFailure)
    assert parsed.message.startswith("Invalid dice notation")
    assert reason in parsed.message


def test_one_bad_term_rejects_whole_expression():
    parsed = parse("3d6 0d6 2d8")
    assert parsed == ParseFailure(message=parsed.message)
    assert "'0d6'" in parsed.message


def test_unicode_digits_are_rejected():
    # Arabic-Indic three
    assert not parse("٣d6").ok


def test_explicit_limits_override_config():
    assert not parse("11d6", max_count=10).ok
    assert not parse("1d21", max_sides=20).ok
    assert parse("10d20", max_count=10, max_sides=20).ok
    assert not parse("3d6 3d6", max_total=5).ok
    assert parse("3d6 2d6", max_total=5).ok


def test_parse_terms_raises():
    with pytest.raises(DiceError) as exc:
        parse_terms("3d0")
    assert str(exc.value).startswith("Invalid dice notation")
