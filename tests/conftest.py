"""Shared test fixtures for Wumpus."""

from collections.abc import Callable, Iterable, Sequence

import pytest
import structlog

from wumpus.engine.cave import DODECAHEDRON, Cave
from wumpus.engine.events import Event
from wumpus.engine.state import GameObject, GameState
from wumpus.engine.turn import Action


class ScriptedRandom:
    """RandomSource that hands out a fixed sequence of draws."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self.calls: list[int] = []

    def randrange(self, n: int) -> int:
        assert self.values, f"random source exhausted (asked for [0, {n}))"
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted draw {value} outside [0, {n})"
        self.calls.append(n)
        return value

    @property
    def exhausted(self) -> bool:
        return not self.values


class ScriptedPlayer:
    """Player answering from a script and recording narration."""

    def __init__(self, actions: Sequence[Action], rooms=(), ranges=(), path=()):
        self.actions = list(actions)
        self.rooms = list(rooms)
        self.ranges = list(ranges)
        self.path = list(path)
        self.narrated: list[Event] = []

    def narrate(self, events):
        self.narrated.extend(events)

    def choose_action(self):
        return self.actions.pop(0)

    def choose_room(self):
        return self.rooms.pop(0)

    def choose_range(self):
        return self.ranges.pop(0)

    def choose_path_entry(self, index, path, hunter_room):
        return self.path.pop(0)


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(40),
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def cave() -> Cave:
    return DODECAHEDRON


@pytest.fixture
def scripted() -> Callable[..., ScriptedRandom]:
    """Factory: ``scripted(1, 0, 2)`` draws 1, then 0, then 2."""
    return lambda *values: ScriptedRandom(values)


@pytest.fixture
def place() -> Callable[..., GameState]:
    """Factory building a state with objects in chosen rooms.

    Unnamed objects go to rooms 10-19, well away from room 0.
    """

    def _place(
        hunter: int = 0,
        wumpus: int = 10,
        pits: tuple[int, int] = (11, 12),
        bats: tuple[int, int] = (13, 14),
    ) -> GameState:
        return GameState.from_locations(
            {
                GameObject.HUNTER: hunter,
                GameObject.WUMPUS: wumpus,
                GameObject.PIT1: pits[0],
                GameObject.PIT2: pits[1],
                GameObject.BATS1: bats[0],
                GameObject.BATS2: bats[1],
            }
        )

    return _place


@pytest.fixture
def player() -> Callable[..., ScriptedPlayer]:
    return ScriptedPlayer
