"""Interactive console frontend: prompts, map printing and the command loop."""
from __future__ import annotations

import random

from skirmish.components.game_state import GamePhase
from skirmish.config import GameConfig
from skirmish.console.prompts import InputFn, OutputFn, read_int, read_string
from skirmish.events.bus import EventBus
from skirmish.factories.roster import PlayerProfile
from skirmish.rendering.text_renderer import render_map
from skirmish.session import create_session
from skirmish.systems.console_system import ConsoleSystem
from skirmish.utils.commands import COMMAND_PROMPT, ControlCommand


def prompt_player_profile(input_fn: InputFn = input, out: OutputFn = print) -> PlayerProfile:
    name = read_string("Please enter your name", input_fn, out)
    health = read_int("Please enter your health", input_fn, out)
    armor = read_int("Please enter your armor", input_fn, out)
    damage = read_int("Please enter your damage", input_fn, out)
    return PlayerProfile(name=name, health=health, armor=armor, damage=damage)


def run_console_game(
    config: GameConfig,
    *,
    rng: random.Random | None = None,
    input_fn: InputFn = input,
    out: OutputFn = print,
    profile: PlayerProfile | None = None,
) -> GamePhase:
    """Play one game on the console and return the terminal phase.

    Raises ConfigError before any prompt when the configuration is unusable.
    End of input, during character creation or at the command prompt, is
    treated like the exit command.
    """
    config.validate()
    out("--- Initializing ---")
    if profile is None:
        out("--- Create your character ---")
        try:
            profile = prompt_player_profile(input_fn, out)
        except EOFError:
            return GamePhase.QUIT

    out("--- Creating other game characters ---")
    bus = EventBus()
    session = create_session(config, profile, event_bus=bus, rng=rng)
    ConsoleSystem(bus, out)

    out("--- Starting game ---")
    while True:
        out(render_map(session.world))
        try:
            token = read_string(COMMAND_PROMPT, input_fn, out)
        except EOFError:
            token = ControlCommand.EXIT.value
        result = session.turns.submit(token)
        if result.phase.is_terminal:
            return result.phase
