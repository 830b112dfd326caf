"""Interactive read/print loop over the engine core."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

from zork_engine.config import configure_logging, load_config
from zork_engine.engine.game import Game
from zork_engine.models.results import MoveOutcome
from zork_engine.world.consistency import validate_world

logger = logging.getLogger(__name__)

PROMPT = "Which direction would you like to go?"
QUIT_WORDS = {"quit", "exit", "q"}


def render_turn(game: Game, line: str) -> Optional[str]:
    """Return the message for one input line, or None when nothing extra is printed."""
    turn = game.command(line)
    if not turn.recognized:
        return "Invalid direction."
    outcome = turn.move.outcome
    if outcome is MoveOutcome.BLOCKED:
        return "The way is shut!"
    if outcome is MoveOutcome.INVALID_STATE:
        return "You cannot move from here."
    return None


def run_loop(game: Game, lines: Iterable[str], write: Callable[[str], None]) -> None:
    """Drive the game until the input runs out or a quit word is read."""
    write(game.current_description())
    write(PROMPT)
    for raw in lines:
        line = raw.strip()
        if line.lower() in QUIT_WORDS:
            break
        message = render_turn(game, line)
        if message:
            write(message)
        write(game.current_description())
        write(PROMPT)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="zork")
    parser.add_argument("--config", default="configs/config.yaml")
    parser.add_argument("--world", default=None)
    parser.add_argument("--check", action="store_true", help="Report world consistency issues and exit")
    args = parser.parse_args(argv)

    cfg = load_config(args.config).resolve_paths(Path.cwd())
    configure_logging(cfg.logging)

    world_file = Path(args.world) if args.world else cfg.world.data_file
    game = Game.load(world_file)

    if args.check:
        issues = validate_world(game.world)
        for issue in issues:
            print(issue)
        print(f"rooms: {len(game.world)}")
        print(f"issues: {len(issues)}")
        return 1 if issues else 0

    for issue in validate_world(game.world, strict=cfg.world.strict_consistency):
        logger.warning("World issue: %s", issue)
    run_loop(game, sys.stdin, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
