import pytest

from dice_keypad.models import ParseOk, RollTerm
from dice_keypad.parser import format_terms, parse


@pytest.mark.parametrize(
    ("text", "normalized_expression", "terms"),
    [
        ("3d6", "3d6", [RollTerm(count=3, sides=6)]),
        ("1d20", "1d20", [RollTerm(count=1, sides=20)]),
        ("3D6", "3d6", [RollTerm(count=3, sides=6)]),
        (
            "3d6 2d8",
            "3d6 2d8",
            [RollTerm(count=3, sides=6), RollTerm(count=2, sides=8)],
        ),
        (
            "  3d6 \t 4d8\n2d20   1d100 ",
            "3d6 4d8 2d20 1d100",
            [
                RollTerm(count=3, sides=6),
                RollTerm(count=4, sides=8),
                RollTerm(count=2, sides=20),
                RollTerm(count=1, sides=100),
            ],
        ),
        ("100d100", "100d100", [RollTerm(count=100, sides=100)]),
        ("03d006", "3d6", [RollTerm(count=3, sides=6)]),
        ("1d1", "1d1", [RollTerm(count=1, sides=1)]),
    ],
)
def test_parse_acceptance(text, normalized_expression, terms):
    parsed = parse(text)
    assert parsed.ok
    assert isinstance(parsed, ParseOk)
    assert list(parsed.terms) == terms
    assert format_terms(parsed.terms) == normalized_expression


def test_parse_preserves_input_order():
    parsed = parse("2d8 3d6 2d8")
    assert [str(t) for t in parsed.terms] == ["2d8", "3d6", "2d8"]


def test_explicit_limits_allow_large_terms():
    parsed = parse("5000d6", max_count=5000)
    assert parsed.ok
    assert parsed.terms[0].count == 5000
