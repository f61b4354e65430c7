"""Spellguard - command-line bot.

Reads the game host's turn feed on stdin and answers with one command line
per hero on stdout. Logs go to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import Settings, get_settings
from .services.decision_engine import DecisionEngine
from .services.game_session import GameSession
from .services.protocol import ProtocolError, read_setup, read_turn
from .services.turn_coordinator import TurnCoordinator


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(stdin: TextIO, stdout: TextIO, settings: Settings) -> int:
    """Play until the host closes the stream. Returns a process exit status."""
    lines = (line.rstrip("\n") for line in stdin)
    engine = DecisionEngine(log_candidate_scores=settings.log_candidate_scores)

    try:
        setup = read_setup(lines)
        session = GameSession(
            setup,
            coordinator=TurnCoordinator(engine),
            sign_actions=settings.sign_actions,
        )
        while True:
            snapshot = read_turn(lines)
            for command in session.play_lines(snapshot):
                stdout.write(command + "\n")
            stdout.flush()
    except EOFError:
        logger.info("Input closed, game over")
        return 0
    except ProtocolError as e:
        logger.error(f"Bad input from host: {e}")
        return 1


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments; anything unset falls back to settings."""
    parser = argparse.ArgumentParser(description="Spellguard base defense bot")
    parser.add_argument("--log-level", help="Logging level for stderr output (e.g. DEBUG, INFO)")
    parser.add_argument("--debug", action="store_true", help="Log every decision at DEBUG")
    parser.add_argument(
        "--scores", action="store_true", help="Log the utility of every candidate action"
    )
    parser.add_argument(
        "--unsigned", action="store_true", help="Do not append hero names to command lines"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the bot."""
    args = parse_arguments(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.debug:
        overrides["debug"] = True
    if args.scores:
        overrides["log_candidate_scores"] = True
    if args.unsigned:
        overrides["sign_actions"] = False
    settings = get_settings().model_copy(update=overrides)

    configure_logging(settings)
    return run(sys.stdin, sys.stdout, settings)


if __name__ == "__main__":
    sys.exit(main())
