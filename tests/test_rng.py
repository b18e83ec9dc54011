import random

import pytest

from Rollcmd.errors import InvalidDieError, RandomSourceUnavailable
from Rollcmd.rng import make_roll_one, open_random_source
from Rollcmd.rules.dice import RollCommand


def test_seeded_source_is_reproducible():
    a = make_roll_one(open_random_source(42))
    b = make_roll_one(open_random_source(42))
    assert [a(20) for _ in range(10)] == [b(20) for _ in range(10)]


def test_unseeded_source_is_system_random():
    assert isinstance(open_random_source(), random.SystemRandom)


@pytest.mark.parametrize("sides", [1, 2, 6, 20, 100])
def test_roll_one_stays_in_range(sides):
    roll_one = make_roll_one(open_random_source(7))
    for _ in range(200):
        assert 1 <= roll_one(sides) <= sides


def test_roll_one_is_offset_by_one():
    class _Fixed:
        def randrange(self, stop: int) -> int:
            return stop - 1

    assert make_roll_one(_Fixed())(6) == 6


def test_one_sided_die_always_rolls_one():
    result = RollCommand(5, 1).execute(make_roll_one(open_random_source()))
    assert result.values() == (1, 1, 1, 1, 1)


def test_zero_sided_die_is_rejected():
    roll_one = make_roll_one(open_random_source(1))
    with pytest.raises(InvalidDieError) as excinfo:
        roll_one(0)
    assert excinfo.value.sides == 0


def test_unavailable_os_source(monkeypatch):
    def _no_entropy(self, k):
        raise NotImplementedError("/dev/urandom missing")

    monkeypatch.setattr(random.SystemRandom, "getrandbits", _no_entropy)
    with pytest.raises(RandomSourceUnavailable, match="/dev/urandom missing"):
        open_random_source()
