# region Imports
import io

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from matplotlib.lines import Line2D
from PIL import Image

from .analysis import BasinAnalysis
from .config import MAX_HEIGHT, MAX_PNG_SCALE
# endregion

BASIN_CMAP = "tab20"
WALL_RGB = (40, 40, 40)
MINIMUM_RGB = (255, 255, 255)


# region Basin Colouring
def basin_rgb(analysis: BasinAnalysis) -> np.ndarray:
    """(H, W, 3) uint8 image: one colour per basin, walls dark, minima white."""
    labels = analysis.basin_labels()
    H, W = labels.shape
    cmap = matplotlib.colormaps[BASIN_CMAP]

    rgb = np.empty((H, W, 3), dtype=np.uint8)
    rgb[:] = WALL_RGB
    inside = labels >= 0
    if inside.any():
        colours = cmap(labels[inside] % cmap.N)[:, :3]
        # darker with height
        heights = analysis.grid.as_array()[inside].astype(np.float64)
        shade = 1.0 - 0.5 * heights / MAX_HEIGHT
        rgb[inside] = np.clip(colours * shade[:, None] * 255, 0, 255).astype(np.uint8)
    rgb[analysis.minima_mask()] = MINIMUM_RGB
    return rgb


def render_basin_png(analysis: BasinAnalysis, scale: int = 8) -> bytes:
    rgb = basin_rgb(analysis)
    if rgb.size == 0:
        rgb = np.array([[WALL_RGB]], dtype=np.uint8)
    scale = max(1, min(int(scale), MAX_PNG_SCALE))
    rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)

    buf = io.BytesIO()
    Image.fromarray(rgb, "RGB").save(buf, "PNG")
    return buf.getvalue()
# endregion


# region Visualization Function
def show_basin_map(analysis: BasinAnalysis, title="Basins", show=False):
    """
    Render the height grid with a basin overlay and the minima marked.
    Returns the figure; only calls plt.show() when asked to.
    """
    grid = analysis.grid
    fig, ax = plt.subplots(figsize=(8, 8 * max(grid.height, 1) / max(grid.width, 1)))

    # region Base Image
    ax.imshow(grid.as_array(), origin="upper", cmap="terrain", vmin=0, vmax=MAX_HEIGHT, alpha=0.9)
    # endregion

    # region Basin Overlay
    labels = analysis.basin_labels()
    if (labels >= 0).any():
        overlay = np.ma.masked_less(labels, 0)
        ax.imshow(overlay, origin="upper", cmap=BASIN_CMAP, alpha=0.55,
                  vmin=0, vmax=max(len(analysis.basins) - 1, 1), interpolation="nearest")
    # endregion

    # region Minima Markers
    if analysis.minima:
        xs = [m.position[0] for m in analysis.minima]
        ys = [m.position[1] for m in analysis.minima]
        ax.scatter(xs, ys, s=60, edgecolors="black", facecolors="white", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], marker="o", color="w", label="Low point",
               markerfacecolor="white", markeredgecolor="black", markersize=9),
        Patch(facecolor="gray", label="Basin wall (height 9)"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_axis_off()
    fig.tight_layout()
    if show:
        plt.show()
    # endregion
    return fig
# endregion
