# region Imports
import logging
from typing import Dict, Iterator, Optional, Sequence

import numpy as np

from .config import MAX_HEIGHT
from .errors import MalformedInputError
from .models import Position
# endregion

logger = logging.getLogger(__name__)

# up, down, left, right
STEPS_4 = ((0, -1), (0, 1), (-1, 0), (1, 0))


# region Index Helpers
def pos_to_idx(pos: Position, W: int) -> int:
    x, y = pos
    return y * W + x


def idx_to_pos(i: int, W: int) -> Position:
    return (i % W, i // W)


def neighbors_4(pos: Position, W: int, H: int) -> Iterator[Position]:
    x, y = pos
    for dx, dy in STEPS_4:
        xx, yy = x + dx, y + dy
        if 0 <= xx < W and 0 <= yy < H:
            yield (xx, yy)
# endregion


# region Height Grid
class HeightGrid:
    """
    Read-only rectangular grid of single-digit heights.

    Cells live in one flat array indexed by ``y * width + x``. Positions
    outside the bounds have no height at all (``height_at`` returns None and
    ``neighbors_of`` leaves them out), which is what lets an edge cell be a
    minimum with fewer neighbours to beat.
    """

    def __init__(self, heights: np.ndarray):
        heights = np.asarray(heights)
        if heights.size == 0:
            heights = np.zeros((0, 0), dtype=np.int8)
        if heights.ndim != 2:
            raise MalformedInputError(f"height grid must be 2-D, got shape {heights.shape}")
        if heights.size and (heights.min() < 0 or heights.max() > MAX_HEIGHT):
            raise MalformedInputError(
                f"heights must lie in [0, {MAX_HEIGHT}], got [{heights.min()}, {heights.max()}]"
            )

        self.height, self.width = (int(n) for n in heights.shape)
        self._cells = np.ascontiguousarray(heights, dtype=np.int8).ravel().copy()
        self._cells.setflags(write=False)
        logger.debug("Built %dx%d height grid", self.width, self.height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "HeightGrid":
        if not rows:
            return cls(np.zeros((0, 0), dtype=np.int8))
        W = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != W:
                raise MalformedInputError(
                    f"row has {len(row)} cells, expected {W}", line=y + 1
                )
        return cls(np.array(rows, dtype=np.int16))

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def height_at(self, pos: Position) -> Optional[int]:
        if not self.in_bounds(pos):
            return None
        return int(self._cells[pos_to_idx(pos, self.width)])

    def neighbors_of(self, pos: Position) -> Dict[Position, int]:
        W = self.width
        return {q: int(self._cells[pos_to_idx(q, W)]) for q in neighbors_4(pos, W, self.height)}

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def as_array(self) -> np.ndarray:
        """(height, width) read-only view of the cells."""
        return self._cells.reshape(self.height, self.width)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HeightGrid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and bool(
            np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"HeightGrid(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return "\n".join("".join(str(int(h)) for h in row) for row in self.as_array())
# endregion
