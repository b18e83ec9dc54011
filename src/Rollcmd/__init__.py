from Rollcmd.errors import ParseError
from Rollcmd.rules.dice import RollCommand, parse
from Rollcmd.rules.types import RollResult

__all__ = ["ParseError", "RollCommand", "RollResult", "parse"]
