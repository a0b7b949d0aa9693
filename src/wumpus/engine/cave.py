"""The immutable cave the hunt takes place in.

Rooms are zero-based ints. The cave is built once at import time and shared by
every game in the process.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .errors import CaveError

TUNNELS_PER_ROOM = 3

# Vertices and edges of a dodecahedron, as laid out in the 1970s Dartmouth game.
DODECAHEDRON_TABLE: tuple[tuple[int, int, int], ...] = (
    (1, 4, 7), (0, 2, 9), (1, 3, 11), (2, 4, 13), (0, 3, 5),
    (4, 6, 14), (5, 7, 16), (0, 6, 8), (7, 9, 17), (1, 8, 10),
    (9, 11, 18), (2, 10, 12), (11, 13, 19), (3, 12, 14), (5, 13, 15),
    (14, 16, 19), (6, 15, 17), (8, 16, 18), (10, 17, 19), (12, 15, 18),
)


@dataclass(frozen=True)
class Cave:
    """A fixed graph of rooms joined by tunnels."""

    tunnels: Mapping[int, tuple[int, ...]]

    def __len__(self) -> int:
        return len(self.tunnels)

    @property
    def rooms(self) -> range:
        return range(len(self.tunnels))

    def neighbors(self, room: int) -> tuple[int, ...]:
        """Rooms reachable through one tunnel, in table order."""
        return self.tunnels[room]

    def is_connected(self, from_room: int, to_room: int) -> bool:
        return to_room in self.tunnels[from_room]


def build_cave(table: Sequence[Sequence[int]]) -> Cave:
    """Validate an adjacency table and wrap it in a Cave.

    Every room needs exactly ``TUNNELS_PER_ROOM`` distinct neighbours, none of
    them itself, and every tunnel must run both ways.
    """
    size = len(table)
    tunnels: dict[int, tuple[int, ...]] = {}
    for room, row in enumerate(table):
        row = tuple(row)
        if len(row) != TUNNELS_PER_ROOM or len(set(row)) != len(row):
            raise CaveError(f"room {room} needs {TUNNELS_PER_ROOM} distinct tunnels")
        for other in row:
            if not 0 <= other < size:
                raise CaveError(f"room {room} has a tunnel to unknown room {other}")
            if other == room:
                raise CaveError(f"room {room} has a tunnel to itself")
        tunnels[room] = row

    for room, row in tunnels.items():
        for other in row:
            if room not in tunnels[other]:
                raise CaveError(f"tunnel {room}->{other} has no way back")

    return Cave(tunnels=tunnels)


DODECAHEDRON = build_cave(DODECAHEDRON_TABLE)
