# region Imports
import logging
from typing import Iterator

from .grid import HeightGrid
from .models import Minimum
# endregion

logger = logging.getLogger(__name__)


# region Low Point Scan
def is_minimum(grid: HeightGrid, pos) -> bool:
    h = grid.height_at(pos)
    if h is None:
        return False
    # no neighbours (1x1 grid) is vacuously a minimum; equal heights disqualify
    return all(hn > h for hn in grid.neighbors_of(pos).values())


def find_minima(grid: HeightGrid) -> Iterator[Minimum]:
    """Lazily yield every local minimum in row-major order."""
    for pos in grid.positions():
        if is_minimum(grid, pos):
            yield Minimum(pos, grid.height_at(pos))
# endregion
