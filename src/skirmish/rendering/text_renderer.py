from __future__ import annotations

from esper import World

from skirmish.utils.world_queries import get_grid, is_player, roster_characters

BACKGROUND_GLYPH = "."
PLAYER_GLYPH = "P"
ENEMY_GLYPH = "E"


def glyph_rows(world: World) -> list[list[str]]:
    """Return the map as rows of glyphs; dead characters are not drawn."""
    grid = get_grid(world)
    rows = [[BACKGROUND_GLYPH for _ in range(grid.width)] for _ in range(grid.height)]
    for entity, position, stats in roster_characters(world):
        if stats.is_dead or not grid.contains(position.x, position.y):
            continue
        rows[position.y][position.x] = PLAYER_GLYPH if is_player(world, entity) else ENEMY_GLYPH
    return rows


def render_map(world: World) -> str:
    return "\n".join(" ".join(row) for row in glyph_rows(world))
