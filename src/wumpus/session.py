"""Session layer: one cave set-up, played for as many rounds as the player likes."""

from .engine.cave import DODECAHEDRON, Cave
from .engine.dice import RandomSource
from .engine.state import GameState, Status, new_game_state
from .engine.turn import Player, play_round
from .logging import get_logger

logger = get_logger(__name__)


class GameSession:
    """Wraps a Cave + GameState + RandomSource across replays."""

    def __init__(self, cave: Cave, state: GameState, rng: RandomSource):
        self.cave = cave
        self.state = state
        self.rng = rng
        self.rounds_played = 0

    @classmethod
    def new(cls, rng: RandomSource, cave: Cave = DODECAHEDRON) -> "GameSession":
        """Set up a fresh cave with everything in its own room."""
        state = new_game_state(rng, cave)
        logger.info(
            "game_setup",
            placements={obj.value: room for obj, room in state.locations.items()},
        )
        return cls(cave, state, rng)

    def play_round(self, player: Player) -> Status:
        status, turns = play_round(self.state, self.cave, self.rng, player)
        self.rounds_played += 1
        logger.info(
            "round_finished",
            status=status.value,
            turns=turns,
            arrows=self.state.arrows_remaining(),
            round=self.rounds_played,
        )
        return status

    def replay(self) -> None:
        """Reset to the same set-up for another round."""
        self.state.reset_to_initial()
        logger.info("game_reset", round=self.rounds_played + 1)
