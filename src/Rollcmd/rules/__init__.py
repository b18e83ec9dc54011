from .dice import RollCommand, parse
from .types import RollResult

__all__ = ["RollCommand", "RollResult", "parse"]
