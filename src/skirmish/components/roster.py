from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Roster:
    """Ordered character entities; turn resolution walks them in this order."""
    entities: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)
