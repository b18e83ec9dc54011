import pytest

from Rollcmd.metrics import get_counter
from Rollcmd.roller import parse_tokens, roll_tokens
from Rollcmd.rules.dice import RollCommand


def test_parse_tokens_drops_invalid_and_keeps_order():
    commands = parse_tokens(["2d6", "abc", "20", "1d2d3", "d8"])
    assert commands == [RollCommand(2, 6), RollCommand(1, 20), RollCommand(1, 8)]
    assert get_counter("roll.parse.rejected") == 2


def test_parse_tokens_empty():
    assert parse_tokens([]) == []


def test_roll_tokens_one_line_per_valid_token():
    results = roll_tokens(["3d4", "oops", "6", "", "2d10"], lambda max: max)
    assert [str(r) for r in results] == [
        "4, 4, 4 (Total: 12)",
        "6 (Total: 6)",
        "10, 10 (Total: 20)",
    ]


def test_roll_tokens_shares_roll_one_state(counting_roller):
    results = roll_tokens(["2d6", "3d6"], counting_roller())
    assert [r.values() for r in results] == [(1, 2), (3, 4, 5)]


def test_roll_tokens_accepts_generators():
    results = roll_tokens((t for t in ["1d6", "x"]), lambda max: 1)
    assert len(results) == 1


def test_roll_tokens_propagates_roll_one_errors():
    def refuse(sides: int) -> int:
        raise ValueError("no dice")

    with pytest.raises(ValueError, match="no dice"):
        roll_tokens(["1d6"], refuse)
