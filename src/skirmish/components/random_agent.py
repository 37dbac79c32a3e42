from dataclasses import dataclass


@dataclass(slots=True)
class RandomAgent:
    """Marker component for an NPC that picks a random cardinal direction each turn."""
