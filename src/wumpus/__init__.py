"""Hunt the Wumpus on the console."""

import sys
from collections.abc import Sequence

from .config import Config
from .console import ConsolePlayer, run
from .engine.dice import SeededRandom
from .logging import configure_logging, get_logger
from .session import GameSession

__all__ = ["main", "Config", "GameSession"]


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the wumpus command."""
    config = Config.from_env().with_args(argv)

    log_stream = configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )
    try:
        return _play(config)
    finally:
        if config.log_file:
            log_stream.close()


def _play(config: Config) -> int:
    logger = get_logger(__name__)
    logger.info("application_starting", seed=config.seed)

    session = GameSession.new(SeededRandom(config.seed))
    try:
        run(session, ConsolePlayer(), instructions=config.instructions)
    except KeyboardInterrupt:
        print(file=sys.stdout)
        logger.info("interrupted", rounds=session.rounds_played)
        return 130
    except Exception:
        logger.exception("unexpected_error", rounds=session.rounds_played)
        raise

    logger.info("application_finished", rounds=session.rounds_played)
    return 0
