"""
Grid Position Module - Integer 2D coordinate used as a search node.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class GridPos:
    """
    Immutable 2D position, hashable so it can key search bookkeeping.

    Attributes:
        x: Column, increasing to the right
        y: Row, increasing downwards
    """
    x: int
    y: int

    @classmethod
    def from_str(cls, text: str) -> 'GridPos':
        """
        Parse "x,y".

        Raises:
            ValueError: If text is not two comma separated integers
        """
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'x,y', got {text!r}")
        return cls(int(parts[0].strip()), int(parts[1].strip()))

    def __add__(self, other: 'GridPos') -> 'GridPos':
        return GridPos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'GridPos') -> 'GridPos':
        return GridPos(self.x - other.x, self.y - other.y)

    def manhattan(self) -> int:
        """Manhattan distance from the origin."""
        return abs(self.x) + abs(self.y)

    def neighbours(self) -> Iterator['GridPos']:
        """The four orthogonally adjacent positions (up, right, down, left)."""
        yield GridPos(self.x, self.y - 1)
        yield GridPos(self.x + 1, self.y)
        yield GridPos(self.x, self.y + 1)
        yield GridPos(self.x - 1, self.y)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
