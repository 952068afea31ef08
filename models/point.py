from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """
    A cell of the raster grid.

    Points are immutable values: two Points are equal when both integer
    coordinates match, and they can be copied and hashed freely.
    """

    x: int = 0
    y: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        """(x, y), the form cv2 and pybresenham expect."""
        return (self.x, self.y)

    def equals(self, other) -> bool:
        return self == other

    def describe(self) -> str:
        return f"({self.x}, {self.y})"

    def __str__(self):
        return self.describe()
