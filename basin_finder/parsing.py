# region Imports
import logging
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_INPUT_DIR, DEFAULT_INPUT_NAME, INPUT_SUFFIX
from .errors import MalformedInputError
from .grid import HeightGrid
# endregion

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


# region Text Parsing
def parse_height_grid(text: str) -> HeightGrid:
    rows: List[List[int]] = []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for y, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        row = []
        for x, ch in enumerate(line, start=1):
            if ch not in DIGITS:
                raise MalformedInputError(f"invalid character {ch!r}", line=y, column=x)
            row.append(int(ch))
        rows.append(row)
    return HeightGrid.from_rows(rows)


def read_height_grid(path: Union[str, Path]) -> HeightGrid:
    path = Path(path)
    logger.debug("Reading height grid from %s", path)
    try:
        text = path.read_text(encoding="ascii")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{path.name}: non-ASCII byte at offset {e.start}") from e
    return parse_height_grid(text)
# endregion


# region Input Resolution
def resolve_input_path(
    name: Optional[str] = None,
    input_dir: Union[str, Path] = DEFAULT_INPUT_DIR,
) -> Path:
    """An existing file is used as-is, otherwise ``<input_dir>/<name>.input``."""
    name = name or DEFAULT_INPUT_NAME
    direct = Path(name)
    if direct.is_file():
        return direct.resolve()
    path = Path(input_dir) / f"{name}{INPUT_SUFFIX}"
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.resolve()
# endregion
