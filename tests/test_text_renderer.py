from skirmish.components.combat_stats import CombatStats
from skirmish.rendering.text_renderer import render_map

from tests.helpers import add_character, make_world


def test_map_rows_follow_y_and_columns_follow_x():
    world, _ = make_world(width=3, height=2)
    add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#1", 2, 1)

    assert render_map(world) == "P . .\n. . E"


def test_dead_characters_are_not_drawn():
    world, _ = make_world(width=2, height=2)
    add_character(world, "Hero", 0, 0, player=True)
    enemy = add_character(world, "Enemy#1", 1, 1)
    world.component_for_entity(enemy, CombatStats).health = 0

    assert render_map(world) == "P .\n. ."


def test_empty_grid():
    world, _ = make_world(width=1, height=3)

    assert render_map(world) == ".\n.\n."
