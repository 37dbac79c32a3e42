from dataclasses import dataclass


@dataclass
class Character:
    """Identifies a character by its display name."""
    name: str
