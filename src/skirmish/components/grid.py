from dataclasses import dataclass


@dataclass(slots=True)
class Grid:
    """Fixed-size playing field; cells are addressed as (x, y) from the top-left."""
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def cell_count(self) -> int:
        return self.width * self.height
