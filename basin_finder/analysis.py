# region Imports
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .basins import expand_basins
from .config import TOP_BASINS
from .grid import HeightGrid
from .minima import find_minima
from .models import Basin, Minimum
from .ranking import basin_sizes, rank_basins, risk_sum
# endregion

logger = logging.getLogger(__name__)


# region Analysis Result
@dataclass
class BasinAnalysis:
    grid: HeightGrid
    minima: List[Minimum]
    basins: List[Basin]     # basins[i] is seeded by minima[i]

    def part_one(self) -> int:
        return risk_sum(self.minima)

    def part_two(self, top: int = TOP_BASINS) -> int:
        return rank_basins(self.basins, top=top)

    def basin_sizes(self) -> List[int]:
        return basin_sizes(self.basins)

    def basin_labels(self) -> np.ndarray:
        """
        (height, width) int array holding the index of the basin that owns
        each cell, -1 for cells in no basin. Overlapping cells take the
        index of the later basin.
        """
        labels = np.full((self.grid.height, self.grid.width), -1, dtype=np.int32)
        for k, basin in enumerate(self.basins):
            for x, y in basin:
                labels[y, x] = k
        return labels

    def minima_mask(self) -> np.ndarray:
        mask = np.zeros((self.grid.height, self.grid.width), dtype=bool)
        for (x, y), _ in self.minima:
            mask[y, x] = True
        return mask
# endregion


# region Entry Point
def analyze(grid: HeightGrid, *, max_workers: Optional[int] = None) -> BasinAnalysis:
    minima = list(find_minima(grid))
    logger.debug("Found %d minima in %dx%d grid", len(minima), grid.width, grid.height)
    basins = expand_basins(grid, (m.position for m in minima), max_workers=max_workers)
    return BasinAnalysis(grid=grid, minima=minima, basins=basins)
# endregion
