"""
Grid Module - 2D grid of cell values backed by a numpy array.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .point import GridPos


class Grid:
    """
    2D grid of values addressed by (x, y).

    Storage is a numpy array of shape (height, width), so cells[y, x]
    is the value at column x, row y.

    Attributes:
        cells: Underlying numpy array
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValueError(f"Grid needs a 2D array, got {cells.ndim}D")
        self.cells = cells

    @classmethod
    def filled(cls, value: Any, width: int, height: int) -> 'Grid':
        """Create grid of the given size with every cell set to value."""
        return cls(np.full((height, width), value))

    @classmethod
    def from_2d(cls, rows: Sequence[Sequence[Any]], dtype: Any = None) -> 'Grid':
        """
        Create grid copying values from a list of rows.

        Raises:
            ValueError: If rows is empty or row lengths vary
        """
        if not rows:
            raise ValueError("Grid needs at least one row")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row lengths vary: row {i} has {len(row)} cells, expected {width}")
        return cls(np.array([list(row) for row in rows], dtype=dtype))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'Grid':
        """Create a character grid, one cell per character. Blank lines are skipped."""
        rows = [list(line) for line in (raw.rstrip("\r\n") for raw in lines) if line]
        return cls.from_2d(rows, dtype="<U1")

    @classmethod
    def from_digits(cls, lines: Iterable[str]) -> 'Grid':
        """
        Create an integer grid where each character is a single digit.

        Raises:
            ValueError: If a cell is not a digit, or row lengths vary
        """
        rows: List[List[int]] = []
        for line in lines:
            line = line.strip()
            if not line:
                continue
            if not line.isdigit():
                raise ValueError(f"Non-digit cell in line {line!r}")
            rows.append([int(c) for c in line])
        return cls.from_2d(rows, dtype=np.int64)

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def dim(self) -> GridPos:
        """Grid dimensions as (width, height)."""
        return GridPos(self.width, self.height)

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Any:
        """
        Get value at (x, y) as a plain Python value.

        Raises:
            IndexError: If (x, y) is outside the grid
        """
        self._check_bounds(x, y)
        return self.cells[y, x].item()

    def __getitem__(self, pos: GridPos) -> Any:
        return self.get(pos.x, pos.y)

    def set(self, x: int, y: int, value: Any) -> None:
        self._check_bounds(x, y)
        self.cells[y, x] = value

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would wrap negative indices round to the far edge
        if not self.is_in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")

    def positions(self) -> Iterator[GridPos]:
        """All positions, left to right then top to bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield GridPos(x, y)

    def find(self, predicate: Callable[[Any], bool]) -> Optional[Tuple[GridPos, Any]]:
        """
        Scan left to right, top to bottom for the first matching cell.

        Returns:
            (position, value) of the first match, or None
        """
        for pos in self.positions():
            value = self[pos]
            if predicate(value):
                return pos, value
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    __hash__ = None

    def __str__(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self.cells.tolist())
