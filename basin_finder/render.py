# region Imports
from itertools import cycle
from typing import Sequence

from .analysis import BasinAnalysis
from .config import BASIN_COLOURS
# endregion

RESET = "\x1b[0m"
BOLD = 1
DIM = 2
ON_BLACK = 40
FG_GREEN = 32
FG_RED = 31


# region ANSI Helpers
def paint(text: str, *codes: int) -> str:
    if not codes:
        return text
    return f"\x1b[{';'.join(str(c) for c in codes)}m{text}{RESET}"
# endregion


# region Terminal Basin Map
def colorize(analysis: BasinAnalysis, colours: Sequence[int] = BASIN_COLOURS) -> str:
    """
    One line per grid row. Basin cells are painted in their basin's colour
    (bold for the minimum, dimmed otherwise); cells outside every basin are
    bold on black.
    """
    grid = analysis.grid
    labels = analysis.basin_labels()
    minima = analysis.minima_mask()
    palette = [c for c, _ in zip(cycle(colours), analysis.basins)]

    lines = []
    for y, row in enumerate(grid.as_array()):
        cells = []
        for x, h in enumerate(row):
            k = labels[y, x]
            if k < 0:
                cells.append(paint(str(int(h)), BOLD, ON_BLACK))
            elif minima[y, x]:
                cells.append(paint(str(int(h)), palette[k], BOLD))
            else:
                cells.append(paint(str(int(h)), palette[k], DIM))
        lines.append("".join(cells))
    return "\n".join(lines)
# endregion
