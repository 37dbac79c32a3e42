from skirmish.factories.roster import (
    PlayerProfile,
    build_roster,
    create_enemy,
    create_npc,
    create_player,
    random_free_cell,
)

__all__ = [
    "PlayerProfile",
    "build_roster",
    "create_enemy",
    "create_npc",
    "create_player",
    "random_free_cell",
]
