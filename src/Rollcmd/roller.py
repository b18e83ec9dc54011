"""Batch glue: turn a list of raw tokens into roll results."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from Rollcmd.errors import ParseError
from Rollcmd.rules.dice import RollCommand
from Rollcmd.rules.types import RollResult


def parse_tokens(tokens: Iterable[str]) -> list[RollCommand]:
    """Parse every token, silently dropping the ones that are not roll commands."""
    commands: list[RollCommand] = []
    for token in tokens:
        try:
            commands.append(RollCommand.parse(token))
        except ParseError:
            continue
    return commands


def roll_tokens(tokens: Iterable[str], roll_one: Callable[[int], int]) -> list[RollResult]:
    """Roll each valid token once, in the order given.

    Every result is produced before any is returned, so an error raised by
    `roll_one` leaves no partial batch behind.
    """
    tokens = list(tokens)
    commands = parse_tokens(tokens)
    results = [cmd.execute(roll_one) for cmd in commands]
    structlog.get_logger().debug(
        "roller.batch.complete",
        tokens=len(tokens),
        rolled=len(results),
        dropped=len(tokens) - len(commands),
    )
    return results
