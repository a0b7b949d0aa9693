"""Tests for arrow flight."""

import pytest

from wumpus.engine.arrow import check_range, deflect, fire
from wumpus.engine.dice import SeededRandom
from wumpus.engine.events import EventKind, kinds
from wumpus.engine.state import Status

OUTCOMES = {EventKind.ARROW_HIT_HUNTER, EventKind.ARROW_HIT_WUMPUS, EventKind.ARROW_MISSED}


def _flight(events) -> list[int]:
    return [e.room for e in events if e.kind is EventKind.ARROW_ENTERS]


# --- Guided flight ---


def test_guided_hit_wumpus(place, cave, scripted):
    state = place(hunter=0, wumpus=7)
    events = []
    status = fire([7], state, cave, scripted(), events)
    assert status is Status.WUMPUS_DEAD
    assert kinds(events) == [EventKind.ARROW_ENTERS, EventKind.ARROW_HIT_WUMPUS]
    assert events[-1].room == 7


def test_guided_hit_wumpus_down_a_corridor(place, cave, scripted):
    state = place(hunter=0, wumpus=3)
    events = []
    status = fire([1, 2, 3], state, cave, scripted(), events)
    assert status is Status.WUMPUS_DEAD
    assert _flight(events) == [1, 2, 3]


def test_guided_arrow_comes_back_to_hunter(place, cave, scripted):
    """A path looping round to the hunter's room kills the hunter."""
    state = place(hunter=0, wumpus=10)
    events = []
    status = fire([1, 2, 3, 4, 0], state, cave, scripted(), events)
    assert status is Status.HUNTER_DEAD
    assert _flight(events) == [1, 2, 3, 4, 0]
    assert events[-1].kind is EventKind.ARROW_HIT_HUNTER


def test_guided_miss(place, cave, scripted):
    state = place(hunter=0, wumpus=10)
    events = []
    rng = scripted()
    status = fire([1, 2], state, cave, rng, events)
    assert status is Status.CONTINUE
    assert kinds(events) == [
        EventKind.ARROW_ENTERS,
        EventKind.ARROW_ENTERS,
        EventKind.ARROW_MISSED,
    ]
    assert rng.calls == []


def test_arrows_fly_over_hazards(place, cave, scripted):
    state = place(hunter=0, wumpus=10, pits=(1, 12), bats=(2, 14))
    events = []
    assert fire([1, 2], state, cave, scripted(), events) is Status.CONTINUE


@pytest.mark.parametrize("path", [[], [1, 2, 3, 4, 0, 1]])
def test_fire_rejects_bad_range(place, cave, scripted, path):
    with pytest.raises(ValueError):
        fire(path, place(), cave, scripted(), [])


# --- Random deflection ---


def test_first_hop_off_course_deflects(place, cave, scripted):
    """Room 5 has no tunnel from room 0: the arrow flies 2 hops at random.

    Hop 1 from room 0 may take any of (1, 4, 7): draw 1 -> room 4.
    Hop 2 from room 4 (0, 3, 5): draw 0 -> room 0 is where it came from,
    redraw 1 -> room 3, where the Wumpus sleeps.
    """
    state = place(hunter=0, wumpus=3)
    events = []
    rng = scripted(1, 0, 1)
    status = fire([5, 14], state, cave, rng, events)
    assert status is Status.WUMPUS_DEAD
    assert _flight(events) == [4, 3]
    assert rng.exhausted
    assert rng.calls == [3, 3, 3]


def test_deflected_arrow_misses_after_budget(place, cave, scripted):
    state = place(hunter=0, wumpus=10)
    events = []
    status = fire([5, 14], state, cave, scripted(1, 2), events)
    assert status is Status.CONTINUE
    assert _flight(events) == [4, 5]
    assert events[-1].kind is EventKind.ARROW_MISSED


def test_first_random_hop_may_take_any_tunnel(place, cave, scripted):
    """With no prior room, tunnel 0 of the hunter's room is fair game."""
    state = place(hunter=0, wumpus=1)
    events = []
    assert fire([5], state, cave, scripted(0), events) is Status.WUMPUS_DEAD


def test_mid_flight_deflection(place, cave, scripted):
    """Hops 1-2 are guided; room 19 has no tunnel from room 2."""
    state = place(hunter=0, wumpus=3)
    events = []
    rng = scripted(0, 1)
    status = fire([1, 2, 19], state, cave, rng, events)
    assert status is Status.WUMPUS_DEAD
    # draw 0 -> room 1 (where the arrow came from) is redrawn
    assert _flight(events) == [1, 2, 3]


def test_deflection_discards_rest_of_path(place, cave, scripted):
    """Once off course the arrow never returns to the named rooms.

    Guided, [1, 19, 18, 10] would have reached the Wumpus in room 10.
    """
    state = place(hunter=0, wumpus=10)
    events = []
    status = fire([1, 19, 18, 10], state, cave, scripted(1, 2, 2), events)
    assert status is Status.CONTINUE
    assert _flight(events) == [1, 2, 11, 12]


def test_deflected_arrow_hits_hunter(place, cave, scripted):
    state = place(hunter=0, wumpus=10)
    events = []
    status = fire([1, 2, 3, 4, 18], state, cave, scripted(0), events)
    assert status is Status.HUNTER_DEAD
    assert _flight(events) == [1, 2, 3, 4, 0]
    assert events[-1].kind is EventKind.ARROW_HIT_HUNTER


@pytest.mark.parametrize("seed", range(200))
def test_deflection_never_doubles_back(place, cave, seed):
    state = place(hunter=19, wumpus=9)
    events = []
    deflect(0, 1, 4, state, cave, SeededRandom(seed), events)
    trail = [0, 1, *_flight(events)]
    for before, after in zip(trail, trail[1:]):
        assert cave.is_connected(before, after)
    for back, ahead in zip(trail, trail[2:]):
        assert back != ahead


@pytest.mark.parametrize("seed", range(200))
def test_off_course_flight_terminates_within_range(place, cave, seed):
    state = place(hunter=0, wumpus=15)
    events = []
    status = fire([5, 6, 7, 8, 9], state, cave, SeededRandom(seed), events)
    assert status in {Status.CONTINUE, Status.WUMPUS_DEAD, Status.HUNTER_DEAD}
    assert 1 <= len(_flight(events)) <= 5
    assert events[-1].kind in OUTCOMES
    assert sum(e.kind in OUTCOMES for e in events) == 1
    if status is Status.CONTINUE:
        assert len(_flight(events)) == 5


def test_check_range():
    check_range([1])
    check_range([1, 2, 3, 4, 5])
    with pytest.raises(ValueError, match="not 0"):
        check_range([])
    with pytest.raises(ValueError, match="not 6"):
        check_range([1, 2, 3, 4, 5, 6])
