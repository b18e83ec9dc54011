"""Randomness sources and the per-die roll function handed to RollCommand.execute."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Protocol

import structlog

from Rollcmd.errors import InvalidDieError, RandomSourceUnavailable


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def open_random_source(seed: int | None = None) -> RandomSource:
    """Return a seeded PRNG when `seed` is given, otherwise OS entropy.

    The OS source is probed once so an unusable entropy pool is reported
    here rather than on the first roll.
    """
    if seed is not None:
        structlog.get_logger().debug("rng.source.opened", kind="seeded", seed=seed)
        return random.Random(seed)
    source = random.SystemRandom()
    try:
        source.getrandbits(8)
    except (NotImplementedError, OSError) as exc:
        raise RandomSourceUnavailable(f"OS randomness source unavailable: {exc}") from exc
    structlog.get_logger().debug("rng.source.opened", kind="system")
    return source


def make_roll_one(source: RandomSource) -> Callable[[int], int]:
    """Build a per-die function producing values in [1, sides]."""

    def roll_one(sides: int) -> int:
        if sides < 1:
            raise InvalidDieError(sides)
        return source.randrange(sides) + 1

    return roll_one
