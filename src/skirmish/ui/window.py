"""Arcade frontend: draws the grid and turns key presses into commands."""
from __future__ import annotations

import random

import arcade

from skirmish.config import GameConfig
from skirmish.constants import (
    DEFAULT_PLAYER_ARMOR,
    DEFAULT_PLAYER_DAMAGE,
    DEFAULT_PLAYER_HEALTH,
    DEFAULT_PLAYER_NAME,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from skirmish.components.game_state import GamePhase
from skirmish.events.bus import EventBus
from skirmish.factories.roster import PlayerProfile
from skirmish.rendering.text_renderer import BACKGROUND_GLYPH, PLAYER_GLYPH, glyph_rows
from skirmish.session import GameSession, create_session
from skirmish.systems.console_system import ConsoleSystem
from skirmish.ui.layout import compute_grid_geometry
from skirmish.utils.world_queries import get_grid

KEY_COMMANDS = {
    arcade.key.UP: "up",
    arcade.key.DOWN: "down",
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.S: "save",
    arcade.key.L: "load",
    arcade.key.ESCAPE: "exit",
}

GLYPH_COLORS = {
    PLAYER_GLYPH: arcade.color.FOREST_GREEN,
}
ENEMY_COLOR = arcade.color.CRIMSON
CELL_COLOR = arcade.color.DARK_SLATE_GRAY
OUTLINE_COLOR = arcade.color.BLACK

_STATUS_TEXT = {
    GamePhase.AWAITING_COMMAND: "Arrows move, S saves, L loads, Esc quits",
    GamePhase.VICTORY: "VICTORY!",
    GamePhase.DEFEAT: "DEFEAT...",
}


class SkirmishWindow(arcade.Window):
    def __init__(self, session: GameSession):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.session = session
        arcade.set_background_color(arcade.color.BLACK)

    def on_draw(self):
        self.clear()
        grid = get_grid(self.session.world)
        geometry = compute_grid_geometry(self.width, self.height, grid.width, grid.height)
        for y, row in enumerate(glyph_rows(self.session.world)):
            for x, glyph in enumerate(row):
                left, right, bottom, top = geometry.cell_bounds(x, y)
                arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, CELL_COLOR)
                arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, OUTLINE_COLOR, 2)
                if glyph == BACKGROUND_GLYPH:
                    continue
                cx, cy = geometry.cell_center(x, y)
                arcade.draw_text(
                    glyph,
                    cx,
                    cy,
                    GLYPH_COLORS.get(glyph, ENEMY_COLOR),
                    max(12, geometry.tile_size // 2),
                    anchor_x="center",
                    anchor_y="center",
                )
        status = _STATUS_TEXT.get(self.session.turns.phase, "")
        arcade.draw_text(status, self.width / 2, 20, arcade.color.WHITE, 14, anchor_x="center")

    def on_key_press(self, symbol: int, modifiers: int):
        token = KEY_COMMANDS.get(symbol)
        if token is None:
            return
        if self.session.turns.phase.is_terminal:
            self.close()
            return
        result = self.session.turns.submit(token)
        if result.phase is GamePhase.QUIT:
            self.close()


def run_window(
    config: GameConfig,
    profile: PlayerProfile | None = None,
    *,
    rng: random.Random | None = None,
) -> GamePhase:
    bus = EventBus()
    session = create_session(
        config,
        profile
        or PlayerProfile(
            DEFAULT_PLAYER_NAME,
            DEFAULT_PLAYER_HEALTH,
            DEFAULT_PLAYER_ARMOR,
            DEFAULT_PLAYER_DAMAGE,
        ),
        event_bus=bus,
        rng=rng,
    )
    # Narration still goes to stdout alongside the window.
    ConsoleSystem(bus)
    SkirmishWindow(session)
    arcade.run()
    return session.turns.phase
