"""Flight of a crooked arrow.

An arrow follows the rooms the hunter names for as long as each one is
reachable through a tunnel from the last. The first time a named room is not
reachable, the rest of the path is thrown away and the arrow flies on at random
for the hops it has left, never doubling straight back.
"""

from collections import deque
from collections.abc import Sequence

from ..logging import get_logger
from .cave import Cave
from .dice import RandomSource
from .events import Event, EventKind, Narration
from .state import MAX_ARROW_RANGE, GameState, Status

logger = get_logger(__name__)


def _arrow_enters(
    room: int, state: GameState, events: Narration, last_hop: bool
) -> Status | None:
    """Resolve the arrow arriving in ``room``; None means it keeps flying."""
    events.append(Event(EventKind.ARROW_ENTERS, rooms=(room,)))
    if room == state.hunter_room:
        events.append(Event(EventKind.ARROW_HIT_HUNTER, rooms=(room,)))
        return Status.HUNTER_DEAD
    if room == state.wumpus_room:
        events.append(Event(EventKind.ARROW_HIT_WUMPUS, rooms=(room,)))
        return Status.WUMPUS_DEAD
    if last_hop:
        events.append(Event(EventKind.ARROW_MISSED, rooms=(room,)))
        return Status.CONTINUE
    return None


def _random_tunnel(
    cave: Cave, room: int, prior: int | None, rng: RandomSource
) -> int:
    tunnels = cave.neighbors(room)
    target = tunnels[rng.randrange(len(tunnels))]
    while target == prior:
        target = tunnels[rng.randrange(len(tunnels))]
    return target


def deflect(
    prior: int | None,
    current: int,
    hops_left: int,
    state: GameState,
    cave: Cave,
    rng: RandomSource,
    events: Narration,
) -> Status:
    """Fly at random from ``current``.

    The arrow makes one hop plus ``hops_left`` more, unless it hits something.
    ``prior`` is the room the arrow came from, or None before its first hop.
    """
    while True:
        target = _random_tunnel(cave, current, prior, rng)
        logger.debug("arrow_deflected", from_room=current, to_room=target)
        status = _arrow_enters(target, state, events, last_hop=hops_left == 0)
        if status is not None:
            return status
        prior, current, hops_left = current, target, hops_left - 1


def check_range(path: Sequence[int]) -> None:
    """Raise ValueError unless ``path`` names 1 to ``MAX_ARROW_RANGE`` rooms."""
    if not 1 <= len(path) <= MAX_ARROW_RANGE:
        raise ValueError(
            f"an arrow flies between 1 and {MAX_ARROW_RANGE} rooms, not {len(path)}"
        )


def fire(
    path: Sequence[int],
    state: GameState,
    cave: Cave,
    rng: RandomSource,
    events: Narration,
) -> Status:
    """Shoot an arrow along ``path`` from the hunter's room.

    Rooms in ``path`` are not checked up front: a room with no tunnel from the
    previous one sends the arrow into random flight.
    """
    check_range(path)
    logger.debug("arrow_fired", hunter=state.hunter_room, path=list(path))

    remaining = deque(path)
    prior: int | None = None
    current = state.hunter_room
    target = remaining.popleft()
    # The last named room always ends the flight, so popleft never runs dry.
    while cave.is_connected(current, target):
        status = _arrow_enters(target, state, events, last_hop=not remaining)
        if status is not None:
            return status
        prior, current, target = current, target, remaining.popleft()

    logger.debug("arrow_off_course", room=current, target=target, hops=len(remaining))
    return deflect(prior, current, len(remaining), state, cave, rng, events)
