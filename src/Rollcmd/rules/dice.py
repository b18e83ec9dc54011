# rules/dice.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from Rollcmd.errors import ParseError
from Rollcmd.metrics import inc_counter, observe_histogram
from Rollcmd.rules.types import RollResult

DELIMITER = "d"
# Pieces must fit an unsigned 32-bit integer to count as a number.
MAX_PIECE = 2**32 - 1


def _parse_piece(piece: str) -> int | None:
    digits = piece[1:] if piece.startswith("+") else piece
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > MAX_PIECE:
        return None
    return value


@dataclass(frozen=True)
class RollCommand:
    """Store roll parameters.

    - count: number of dice to roll
    - sides: number of sides on each die
    """

    count: int
    sides: int

    @classmethod
    def parse(cls, token: str) -> RollCommand:
        """Build a RollCommand from a token like "2d6" or "6".

        The token is split on "d" and every piece that is not a plain
        non-negative integer is dropped. Two surviving numbers are
        (count, sides); one is sides with a count of 1. Anything else
        raises ParseError.
        """
        numbers = [n for n in (_parse_piece(p) for p in token.split(DELIMITER)) if n is not None]
        if len(numbers) == 2:
            count, sides = numbers
        elif len(numbers) == 1:
            count, sides = 1, numbers[0]
        else:
            inc_counter("roll.parse.rejected")
            structlog.get_logger().debug("rules.dice.parse.rejected", token=token, numbers=len(numbers))
            raise ParseError(token)
        inc_counter("roll.parse.ok")
        return cls(count=count, sides=sides)

    def execute(self, roll_one: Callable[[int], int]) -> RollResult:
        """Roll every die with `roll_one` and collect the values in order.

        `roll_one` receives the side count and is called once per die. The
        command holds no state between calls, so it can be executed again
        for a fresh result. Values are passed through unchecked.
        """
        result = RollResult([roll_one(self.sides) for _ in range(self.count)])
        inc_counter("roll.executed")
        observe_histogram("roll.dice", self.count, buckets=[1, 2, 4, 8, 16, 32, 64, 100])
        structlog.get_logger().debug(
            "rules.dice.execute",
            count=self.count,
            sides=self.sides,
            total=result.total(),
        )
        return result


def parse(token: str) -> RollCommand:
    return RollCommand.parse(token)
