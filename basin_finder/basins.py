# region Imports
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

import numpy as np

from .config import BASIN_WALL
from .grid import HeightGrid, idx_to_pos, pos_to_idx
from .models import Basin, Position
# endregion

logger = logging.getLogger(__name__)


# region Flood Fill
def expand_basin(grid: HeightGrid, seed: Position) -> Basin:
    """
    Grow the basin around ``seed`` through 4-connected cells below the wall
    height. Each call keeps its own visited/pending arrays, so runs from
    different seeds never see each other; two minima sharing a low region
    both get the shared cells.
    """
    if not grid.in_bounds(seed):
        raise ValueError(f"seed {seed} outside {grid.width}x{grid.height} grid")

    W = grid.width
    visited = np.zeros(grid.size, dtype=bool)
    pending = np.zeros(grid.size, dtype=bool)

    s = pos_to_idx(seed, W)
    frontier = [s]
    pending[s] = True

    while frontier:
        i = frontier.pop()
        pending[i] = False
        visited[i] = True

        for q, hq in grid.neighbors_of(idx_to_pos(i, W)).items():
            if hq >= BASIN_WALL:
                continue
            j = pos_to_idx(q, W)
            if visited[j] or pending[j]:
                continue
            pending[j] = True
            frontier.append(j)

    members = frozenset(idx_to_pos(int(i), W) for i in np.flatnonzero(visited))
    return Basin(seed=seed, members=members)
# endregion


# region Per-Minimum Expansion
def expand_basins(
    grid: HeightGrid,
    seeds: Iterable[Position],
    *,
    max_workers: Optional[int] = None,
) -> List[Basin]:
    seeds = list(seeds)
    if max_workers is None or max_workers <= 1 or len(seeds) <= 1:
        basins = [expand_basin(grid, s) for s in seeds]
    else:
        logger.debug("Expanding %d basins on %d workers", len(seeds), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            basins = list(pool.map(lambda s: expand_basin(grid, s), seeds))

    logger.debug("Basin sizes: %s", [len(b) for b in basins])
    return basins
# endregion
