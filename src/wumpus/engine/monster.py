"""What the Wumpus does when something disturbs it."""

from ..logging import get_logger
from .cave import Cave
from .dice import RandomSource
from .events import Event, EventKind, Narration
from .state import GameObject, GameState, Status

logger = get_logger(__name__)


def wake(
    state: GameState, cave: Cave, rng: RandomSource, events: Narration
) -> Status:
    """Wake the Wumpus: it takes a random tunnel or stays put, then maybe eats you.

    With ``n`` tunnels out of its room the Wumpus rolls ``n + 1`` ways, so it
    moves with probability ``n / (n + 1)``.
    """
    events.append(Event(EventKind.WUMPUS_WAKES))

    tunnels = cave.neighbors(state.wumpus_room)
    choice = rng.randrange(len(tunnels) + 1)
    if choice < len(tunnels):
        logger.debug(
            "wumpus_moved", from_room=state.wumpus_room, to_room=tunnels[choice]
        )
        state.set_location(GameObject.WUMPUS, tunnels[choice])
        events.append(Event(EventKind.WUMPUS_MOVES))
    else:
        logger.debug("wumpus_stayed", room=state.wumpus_room)

    if state.is_hunter_at(GameObject.WUMPUS):
        events.append(Event(EventKind.WUMPUS_ATTACKS))
        return Status.HUNTER_DEAD
    return Status.CONTINUE
