from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Segment:
    """
    An axis-aligned run of edge cells.

    (x, y) is the leftmost cell of a horizontal segment and the topmost
    cell of a vertical one; the run covers `length` cells from there.
    """

    orientation: Direction
    x: int
    y: int
    length: int

    def __post_init__(self):
        if self.length < 1:
            raise ValueError(f"segment length must be positive, got {self.length}")

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Direction.HORIZONTAL

    @property
    def end(self) -> Tuple[int, int]:
        """Last covered cell (inclusive)."""
        if self.is_horizontal:
            return self.x + self.length - 1, self.y
        return self.x, self.y + self.length - 1

    def cells(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.length):
            if self.is_horizontal:
                yield self.x + i, self.y
            else:
                yield self.x, self.y + i

    def __repr__(self):
        return (
            f"Segment({self.orientation.value}, x={self.x}, y={self.y}, "
            f"len={self.length})"
        )
