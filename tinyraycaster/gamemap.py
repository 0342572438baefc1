"""The level grid: wall cells hold a texture digit, empty cells a space."""

from __future__ import annotations

__all__ = ["GameMap", "default_map"]

_DEFAULT_ROWS = (
    "0000222222220000",
    "1              5",
    "1              5",
    "1     01111    5",
    "0     0        5",
    "0     3     1155",
    "0   1000       5",
    "0   3  0       5",
    "5   4  100011  5",
    "5   4   1      4",
    "0       1      4",
    "2       1  44444",
    "0     000      4",
    "0 111          4",
    "0              4",
    "0002222244444444",
)


class GameMap:
    """A rectangular map given as one row-major string of cells."""

    def __init__(self, width: int, height: int, cells: str) -> None:
        if len(cells) != width * height:
            raise ValueError(
                f"map has {len(cells)} cells, expected {width}x{height}"
            )
        self.width = width
        self.height = height
        self.cells = cells

    def _char(self, i: float, j: float) -> str:
        ii, jj = int(i), int(j)
        if not (0 <= ii < self.width and 0 <= jj < self.height):
            raise IndexError(
                f"cell ({ii}, {jj}) outside {self.width}x{self.height} map"
            )
        return self.cells[ii + jj * self.width]

    def cell(self, i: float, j: float) -> int:
        """Return the wall texture index stored in a cell."""
        return ord(self._char(i, j)) - ord("0")

    def is_empty(self, i: float, j: float) -> bool:
        """Tell whether a cell is open floor."""
        return self._char(i, j) == " "


def default_map() -> GameMap:
    """Return the built-in 16x16 level."""
    return GameMap(16, 16, "".join(_DEFAULT_ROWS))