# region Imports
import logging
import math
from typing import Iterable, List

from .config import TOP_BASINS
from .errors import InsufficientBasinsError
from .models import Basin, Minimum
# endregion

logger = logging.getLogger(__name__)


# region Aggregates
def risk_sum(minima: Iterable[Minimum]) -> int:
    return sum(m.risk_level for m in minima)


def basin_sizes(basins: Iterable[Basin]) -> List[int]:
    return [len(b) for b in basins]


def rank_basins(basins: Iterable[Basin], top: int = TOP_BASINS) -> int:
    """Product of the ``top`` largest basin sizes."""
    sizes = sorted(basin_sizes(basins), reverse=True)
    if top < 1:
        raise ValueError(f"top must be at least 1, got {top}")
    if len(sizes) < top:
        raise InsufficientBasinsError(found=len(sizes), required=top)
    largest = sizes[:top]
    logger.debug("Largest %d basins: %s", top, largest)
    return math.prod(largest)
# endregion
