# config.py
from pathlib import Path

# Heights are single digits; 9 is the wall between basins
MAX_HEIGHT = 9
BASIN_WALL = 9

# Basins multiplied together for part two
TOP_BASINS = 3

# Input resolution: <DEFAULT_INPUT_DIR>/<name><INPUT_SUFFIX>
DEFAULT_INPUT_DIR = Path("input")
DEFAULT_INPUT_NAME = "puzzle"
INPUT_SUFFIX = ".input"

LOG_ENV_VAR = "BASIN_FINDER_LOG"
DEFAULT_LOG_LEVEL = "INFO"

API_PORT = 8081

# Pixels per cell cap for /basins/png
MAX_PNG_SCALE = 64

# ANSI foreground codes cycled per basin: blue, cyan, green, purple, red, white, yellow
BASIN_COLOURS = (34, 36, 32, 35, 31, 37, 33)
