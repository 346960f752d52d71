"""Pytest configuration and fixtures for basin-finder tests."""
import sys
from pathlib import Path

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import matplotlib

matplotlib.use("Agg")

import pytest

from basin_finder.parsing import parse_height_grid

CANONICAL_TEXT = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""


@pytest.fixture
def canonical_text():
    """The standard 5x10 example height map."""
    return CANONICAL_TEXT


@pytest.fixture
def canonical_grid():
    return parse_height_grid(CANONICAL_TEXT)


@pytest.fixture
def input_dir(tmp_path):
    """Temporary input directory holding puzzle.input and example.input."""
    d = tmp_path / "input"
    d.mkdir()
    (d / "puzzle.input").write_text(CANONICAL_TEXT)
    (d / "example.input").write_text(CANONICAL_TEXT)
    return d
