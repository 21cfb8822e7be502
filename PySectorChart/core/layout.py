import math
from typing import Iterator, Tuple


def how_many_rows_columns(n: int) -> Tuple[int, int]:
    """
    Work out how many rows and columns are needed for n cells.
    Favours squarer layouts.
    """
    if n <= 0:
        raise ValueError(f"cell count must be positive, got {n}")
    rows = int(math.floor(math.sqrt(n)))
    cols = int(math.ceil(n / rows))
    return rows, cols


class Tiler:
    """Row-major grid of tiles over a width x height area centred on the origin."""

    def __init__(self, width: float, height: float, nrows: int, ncols: int, margin: float = 10.0):
        if nrows <= 0 or ncols <= 0:
            raise ValueError("tiler needs at least one row and one column")
        self.width = float(width)
        self.height = float(height)
        self.nrows = int(nrows)
        self.ncols = int(ncols)
        self.margin = float(margin)
        self.tile_width = (self.width - 2.0 * self.margin) / self.ncols
        self.tile_height = (self.height - 2.0 * self.margin) / self.nrows

    def __len__(self) -> int:
        return self.nrows * self.ncols

    def center(self, index: int) -> Tuple[float, float]:
        row, col = divmod(index, self.ncols)
        x = -self.width / 2.0 + self.margin + (col + 0.5) * self.tile_width
        y = -self.height / 2.0 + self.margin + (row + 0.5) * self.tile_height
        return x, y

    def __iter__(self) -> Iterator[Tuple[Tuple[float, float], int]]:
        for i in range(len(self)):
            yield self.center(i), i
