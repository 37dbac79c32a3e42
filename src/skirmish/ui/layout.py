from dataclasses import dataclass

from skirmish.constants import BOTTOM_MARGIN, GRID_MAX_HEIGHT_PCT, GRID_MAX_WIDTH_PCT, MIN_TILE_SIZE


@dataclass(slots=True)
class GridGeometry:
    tile_size: int
    start_x: float
    start_y: float
    cols: int
    rows: int

    def cell_bounds(self, x: int, y: int) -> tuple[float, float, float, float]:
        """Return (left, right, bottom, top) for grid cell (x, y).

        Grid row 0 is drawn at the top of the window.
        """
        left = self.start_x + x * self.tile_size
        bottom = self.start_y + (self.rows - 1 - y) * self.tile_size
        return left, left + self.tile_size, bottom, bottom + self.tile_size

    def cell_center(self, x: int, y: int) -> tuple[float, float]:
        left, right, bottom, top = self.cell_bounds(x, y)
        return (left + right) / 2, (bottom + top) / 2


def compute_grid_geometry(window_width: int, window_height: int, cols: int, rows: int) -> GridGeometry:
    """Fit a cols x rows grid into the window, centred horizontally above the status line."""
    max_grid_w = window_width * GRID_MAX_WIDTH_PCT
    max_grid_h = (window_height - BOTTOM_MARGIN) * GRID_MAX_HEIGHT_PCT
    tile_size = int(min(max_grid_w / cols, max_grid_h / rows))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return GridGeometry(tile_size=tile_size, start_x=start_x, start_y=start_y, cols=cols, rows=rows)
