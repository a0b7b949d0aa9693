"""Effects of walking (or being dropped) into a room with something in it."""

from ..logging import get_logger
from .cave import Cave
from .dice import RandomSource
from .events import Event, EventKind, Narration
from .monster import wake
from .state import BATS, PITS, GameObject, GameState, Status

logger = get_logger(__name__)


def check_hazards(
    state: GameState,
    cave: Cave,
    rng: RandomSource,
    events: Narration,
    status: Status = Status.CONTINUE,
) -> Status:
    """Apply whatever is in the hunter's room.

    Checked in order: the Wumpus, bats, pits. Bats may drop the hunter anywhere
    in the cave, including onto another hazard, so the room is checked again
    after every drop. With nothing in the room ``status`` is returned as is.
    """
    while True:
        if state.is_hunter_at(GameObject.WUMPUS):
            events.append(Event(EventKind.BUMPED_WUMPUS))
            return wake(state, cave, rng, events)

        if state.is_hunter_at(*BATS):
            room = rng.randrange(len(cave))
            logger.debug("bats_relocated", from_room=state.hunter_room, to_room=room)
            state.set_location(GameObject.HUNTER, room)
            events.append(Event(EventKind.SNATCHED_BY_BATS))
            status = Status.CONTINUE
            continue

        if state.is_hunter_at(*PITS):
            events.append(Event(EventKind.FELL_IN_PIT))
            return Status.HUNTER_DEAD

        return status
