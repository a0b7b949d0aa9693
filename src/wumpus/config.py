"""Configuration for Wumpus."""

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path

INSTRUCTION_MODES = ("ask", "always", "never")


@dataclass
class Config:
    """Application configuration."""

    seed: int | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    instructions: str = "ask"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        seed = os.getenv("WUMPUS_SEED")
        log_file = os.getenv("WUMPUS_LOG_FILE")
        instructions = os.getenv("WUMPUS_INSTRUCTIONS", cls.instructions).lower()
        if instructions not in INSTRUCTION_MODES:
            instructions = cls.instructions

        return cls(
            seed=int(seed) if seed else None,
            log_level=os.getenv("WUMPUS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("WUMPUS_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            instructions=instructions,
        )

    def with_args(self, argv: Sequence[str] | None = None) -> "Config":
        """Return a copy with command-line flags applied over this config."""
        args = build_parser().parse_args(argv)
        overrides = {
            name: value
            for name, value in vars(args).items()
            if value is not None
        }
        return replace(self, **overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wumpus",
        description="Hunt the Wumpus in a cave of twenty rooms.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random source for a reproducible cave.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Minimum level for log output.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Append logs to this file instead of stderr.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_const",
        const=True,
        help="Emit logs as JSON lines.",
    )
    instructions = parser.add_mutually_exclusive_group()
    instructions.add_argument(
        "--instructions",
        dest="instructions",
        action="store_const",
        const="always",
        help="Show the instructions without asking.",
    )
    instructions.add_argument(
        "--no-instructions",
        dest="instructions",
        action="store_const",
        const="never",
        help="Skip the instructions prompt.",
    )
    return parser
