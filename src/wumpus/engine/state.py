"""Mutable per-game state: where everything is and how many arrows are left.

The initial placement is kept as an immutable snapshot so a round can be
replayed with the same set-up.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .cave import DODECAHEDRON, Cave
from .dice import RandomSource
from .errors import OutOfArrowsError

MAX_ARROWS = 5
MIN_ARROW_RANGE = 1
MAX_ARROW_RANGE = 5


class GameObject(enum.Enum):
    """Everything that occupies a room, in placement order."""

    HUNTER = "hunter"
    WUMPUS = "wumpus"
    PIT1 = "pit1"
    PIT2 = "pit2"
    BATS1 = "bats1"
    BATS2 = "bats2"


PITS = (GameObject.PIT1, GameObject.PIT2)
BATS = (GameObject.BATS1, GameObject.BATS2)
HAZARDS = (GameObject.WUMPUS, *PITS, *BATS)


class Status(enum.Enum):
    CONTINUE = "continue"
    WUMPUS_DEAD = "wumpus_dead"
    HUNTER_DEAD = "hunter_dead"
    QUIT = "quit"


@dataclass(frozen=True)
class Snapshot:
    """Read-only record of where every object started."""

    locations: Mapping[GameObject, int]

    @classmethod
    def of(cls, locations: Mapping[GameObject, int]) -> "Snapshot":
        return cls(MappingProxyType(dict(locations)))


@dataclass
class GameState:
    locations: dict[GameObject, int]
    initial: Snapshot
    arrows: int = MAX_ARROWS

    @classmethod
    def from_locations(cls, locations: Mapping[GameObject, int]) -> "GameState":
        """Start a game from an explicit placement."""
        missing = set(GameObject) - set(locations)
        if missing:
            names = ", ".join(sorted(obj.value for obj in missing))
            raise ValueError(f"no room given for {names}")
        return cls(locations=dict(locations), initial=Snapshot.of(locations))

    def location_of(self, obj: GameObject) -> int:
        return self.locations[obj]

    def set_location(self, obj: GameObject, room: int) -> None:
        self.locations[obj] = room

    @property
    def hunter_room(self) -> int:
        return self.locations[GameObject.HUNTER]

    @property
    def wumpus_room(self) -> int:
        return self.locations[GameObject.WUMPUS]

    def is_hunter_at(self, *objects: GameObject) -> bool:
        """True when the hunter shares a room with any of ``objects``."""
        hunter = self.hunter_room
        return any(self.locations[obj] == hunter for obj in objects)

    def adjacent_objects(self, cave: Cave) -> list[GameObject]:
        """Hazards one tunnel away from the hunter, once per tunnel they sit behind."""
        tunnels = cave.neighbors(self.hunter_room)
        return [
            obj
            for obj in HAZARDS
            for room in tunnels
            if self.locations[obj] == room
        ]

    def arrows_remaining(self) -> int:
        return self.arrows

    def decrement_arrow(self) -> None:
        if self.arrows <= 0:
            raise OutOfArrowsError("the quiver is empty")
        self.arrows -= 1

    def reset_to_initial(self) -> None:
        """Put everything back where it started and refill the quiver."""
        self.locations = dict(self.initial.locations)
        self.arrows = MAX_ARROWS


def new_game_state(rng: RandomSource, cave: Cave = DODECAHEDRON) -> GameState:
    """Place every object in its own random room.

    Objects are placed in enum order; a draw that lands on an already placed
    object is thrown away and redrawn.
    """
    locations: dict[GameObject, int] = {}
    for obj in GameObject:
        room = rng.randrange(len(cave))
        while room in locations.values():
            room = rng.randrange(len(cave))
        locations[obj] = room
    return GameState.from_locations(locations)
