from dataclasses import dataclass


@dataclass(slots=True)
class PlayerControlled:
    """Marker component for the character that follows the typed command."""
