from __future__ import annotations

from collections.abc import Iterable, Iterator


class RollResult:
    """The individual die values from one execution of a RollCommand.

    Values keep the order they were rolled in.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int] = ()):
        self._values: tuple[int, ...] = tuple(values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RollResult):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"RollResult({list(self._values)!r})"

    def __str__(self) -> str:
        return self.to_display_string()

    def values(self) -> tuple[int, ...]:
        return self._values

    def total(self) -> int:
        return sum(self._values, 0)

    def to_display_string(self) -> str:
        """Render as "2, 3, 3 (Total: 8)".

        An empty result renders as " (Total: 0)".
        """
        joined = ", ".join(str(v) for v in self._values)
        return f"{joined} (Total: {self.total()})"
