from dataclasses import dataclass


@dataclass(slots=True)
class GridPosition:
    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y
