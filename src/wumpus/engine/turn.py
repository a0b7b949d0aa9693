"""One turn of the hunt: look around, act, then face whatever is in the room.

``execute`` resolves a single command against the state and is what tests and
scripted games call directly. ``play_turn`` wraps it with the questions asked of
a ``Player`` and the narration sent back to it.
"""

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..logging import get_logger
from .arrow import check_range, fire
from .cave import Cave
from .dice import RandomSource
from .events import Event, EventKind, Narration, kinds
from .hazards import check_hazards
from .monster import wake
from .state import BATS, PITS, GameObject, GameState, Status

logger = get_logger(__name__)

SENSES = {
    GameObject.WUMPUS: EventKind.SMELL_WUMPUS,
    **{pit: EventKind.FEEL_DRAFT for pit in PITS},
    **{bats: EventKind.HEAR_BATS for bats in BATS},
}


class Action(enum.Enum):
    MOVE = "move"
    SHOOT = "shoot"
    QUIT = "quit"


@dataclass(frozen=True)
class Move:
    room: int


@dataclass(frozen=True)
class Shoot:
    path: tuple[int, ...]


@dataclass(frozen=True)
class Quit:
    pass


Command = Move | Shoot | Quit


class Player(Protocol):
    """Whoever is holding the bow: the console, or a script in tests."""

    def narrate(self, events: Sequence[Event]) -> None: ...

    def choose_action(self) -> Action: ...

    def choose_room(self) -> int | None:
        """Where to move; None when the answer was not a room number."""
        ...

    def choose_range(self) -> int: ...

    def choose_path_entry(
        self, index: int, path: Sequence[int], hunter_room: int
    ) -> int: ...


def look(state: GameState, cave: Cave) -> Narration:
    """Describe the hunter's room, nearby hazards and the quiver."""
    tunnels = cave.neighbors(state.hunter_room)
    events = [
        Event(EventKind.LOCATION, rooms=(state.hunter_room,)),
        Event(EventKind.TUNNELS, rooms=tunnels),
    ]
    events.extend(Event(SENSES[obj]) for obj in state.adjacent_objects(cave))
    events.append(Event(EventKind.QUIVER, count=state.arrows_remaining()))
    return events


def _move(command: Move, state: GameState, cave: Cave, events: Narration) -> Status:
    if cave.is_connected(state.hunter_room, command.room):
        logger.debug("hunter_moved", from_room=state.hunter_room, to_room=command.room)
        state.set_location(GameObject.HUNTER, command.room)
    else:
        events.append(Event(EventKind.NO_TUNNEL, rooms=(command.room,)))
    return Status.CONTINUE


def _shoot(
    command: Shoot, state: GameState, cave: Cave, rng: RandomSource, events: Narration
) -> Status:
    if state.arrows_remaining() == 0:
        events.append(Event(EventKind.OUT_OF_ARROWS))
        return Status.CONTINUE
    check_range(command.path)
    state.decrement_arrow()
    status = fire(command.path, state, cave, rng, events)
    if status is Status.CONTINUE:
        return wake(state, cave, rng, events)
    return status


def execute(
    command: Command,
    state: GameState,
    cave: Cave,
    rng: RandomSource,
    events: Narration,
) -> Status:
    """Carry out one command. Hazards in the hunter's room are not checked here."""
    if isinstance(command, Move):
        return _move(command, state, cave, events)
    if isinstance(command, Shoot):
        return _shoot(command, state, cave, rng, events)
    if isinstance(command, Quit):
        return Status.QUIT
    raise TypeError(f"unknown command {command!r}")


def ask_command(player: Player, state: GameState) -> Command | None:
    """Put the questions for one action to the player.

    Returns None when the player wanted to move but gave no usable room. A shot
    with an empty quiver asks nothing further.
    """
    action = player.choose_action()
    if action is Action.QUIT:
        return Quit()
    if action is Action.MOVE:
        room = player.choose_room()
        return Move(room) if room is not None else None
    if state.arrows_remaining() == 0:
        return Shoot(path=())

    path: list[int] = []
    for index in range(player.choose_range()):
        path.append(player.choose_path_entry(index, path, state.hunter_room))
    return Shoot(path=tuple(path))


def play_turn(
    state: GameState, cave: Cave, rng: RandomSource, player: Player
) -> Status:
    player.narrate(look(state, cave))

    events: Narration = []
    command = ask_command(player, state)
    if command is None:
        status = Status.CONTINUE
    else:
        logger.debug("command", command=type(command).__name__.lower())
        status = execute(command, state, cave, rng, events)
    if status is Status.CONTINUE:
        status = check_hazards(state, cave, rng, events, status)

    logger.debug(
        "turn_finished",
        status=status.value,
        events=[kind.value for kind in kinds(events)],
    )
    player.narrate(events)
    return status


def play_round(
    state: GameState, cave: Cave, rng: RandomSource, player: Player
) -> tuple[Status, int]:
    """Play turns until the round is decided. Returns the status and turn count."""
    status = Status.CONTINUE
    turns = 0
    while status is Status.CONTINUE:
        status = play_turn(state, cave, rng, player)
        turns += 1
    return status, turns
