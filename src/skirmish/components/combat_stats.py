from dataclasses import dataclass


@dataclass(slots=True)
class CombatStats:
    """Health, armor and flat attack damage of a character.

    ``health`` may go negative after an overflowing hit. ``is_dead`` is derived
    from it so the two can never disagree.
    """
    health: int
    armor: int
    damage: int

    @property
    def is_dead(self) -> bool:
        return self.health <= 0