"""Entry point for the Skirmish grid combat game.

Runs the console game by default; ``--window`` opens the arcade frontend.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import replace
from pathlib import Path

from skirmish.config import GameConfig, load_config
from skirmish.console.game import run_console_game
from skirmish.constants import DEFAULT_PLAYER_ARMOR, DEFAULT_PLAYER_DAMAGE, DEFAULT_PLAYER_HEALTH
from skirmish.errors import ConfigError
from skirmish.factories.roster import PlayerProfile

logger = logging.getLogger("skirmish.main")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skirmish", description="Turn-based grid skirmish")
    parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible games")
    parser.add_argument("--save-path", type=Path, default=None, help="Where save/load keeps the roster")
    parser.add_argument("--name", default=None, help="Player name; skips the character prompts")
    parser.add_argument("--health", type=int, default=DEFAULT_PLAYER_HEALTH, help="Player health with --name")
    parser.add_argument("--armor", type=int, default=DEFAULT_PLAYER_ARMOR, help="Player armor with --name")
    parser.add_argument("--damage", type=int, default=DEFAULT_PLAYER_DAMAGE, help="Player damage with --name")
    parser.add_argument("--window", action="store_true", help="Open the graphical window instead of the console")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    config = load_config(args.config) if args.config is not None else GameConfig()
    if args.save_path is not None:
        config = replace(config, save_path=args.save_path)
    config.validate()
    return config


def profile_from_args(args: argparse.Namespace) -> PlayerProfile | None:
    if args.name is None:
        return None
    return PlayerProfile(name=args.name, health=args.health, armor=args.armor, damage=args.damage)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed)
    try:
        config = resolve_config(args)
        profile = profile_from_args(args)
        if args.window:
            from skirmish.ui.window import run_window

            run_window(config, profile, rng=rng)
        else:
            run_console_game(config, rng=rng, profile=profile)
    except ConfigError as exc:
        logger.error("%s", exc)
        print(str(exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
