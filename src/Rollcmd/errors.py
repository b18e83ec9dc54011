"""Rollcmd exception hierarchy."""


class RollcmdError(Exception):
    """Base exception for all Rollcmd errors."""


class ParseError(RollcmdError, ValueError):
    """Raised when a token does not resolve to a roll command."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid RollCommand: {token}")


class InvalidDieError(RollcmdError, ValueError):
    """Raised when asked to roll a die with fewer than one side."""

    def __init__(self, sides: int):
        self.sides = sides
        super().__init__(f"Cannot roll a die with {sides} sides")


class RandomSourceUnavailable(RollcmdError):
    """Raised when the operating system randomness source cannot be used."""
