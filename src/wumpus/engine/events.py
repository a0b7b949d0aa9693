"""Narration events produced by the engine.

The engine never prints. Each operation appends events to a list which the
console (or a test) renders afterwards.
"""

import enum
from dataclasses import dataclass

Narration = list["Event"]


class EventKind(enum.Enum):
    # Looking around
    LOCATION = "location"
    TUNNELS = "tunnels"
    SMELL_WUMPUS = "smell_wumpus"
    FEEL_DRAFT = "feel_draft"
    HEAR_BATS = "hear_bats"
    QUIVER = "quiver"

    # Player actions
    NO_TUNNEL = "no_tunnel"
    OUT_OF_ARROWS = "out_of_arrows"

    # Arrow flight
    ARROW_ENTERS = "arrow_enters"
    ARROW_HIT_HUNTER = "arrow_hit_hunter"
    ARROW_HIT_WUMPUS = "arrow_hit_wumpus"
    ARROW_MISSED = "arrow_missed"

    # Wumpus
    WUMPUS_WAKES = "wumpus_wakes"
    WUMPUS_MOVES = "wumpus_moves"
    WUMPUS_ATTACKS = "wumpus_attacks"

    # Hazards
    BUMPED_WUMPUS = "bumped_wumpus"
    SNATCHED_BY_BATS = "snatched_by_bats"
    FELL_IN_PIT = "fell_in_pit"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    rooms: tuple[int, ...] = ()
    count: int | None = None

    @property
    def room(self) -> int | None:
        return self.rooms[0] if self.rooms else None


def kinds(events: list[Event]) -> list[EventKind]:
    """The kinds of ``events`` in order; handy when only the story matters."""
    return [event.kind for event in events]
