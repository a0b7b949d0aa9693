"""Console front end: prompts, input validation and the game's classic messages.

Rooms are numbered from 1 on screen and from 0 everywhere else; conversion
happens only in this module.
"""

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .engine.cave import TUNNELS_PER_ROOM
from .engine.events import Event, EventKind
from .engine.state import (
    MAX_ARROW_RANGE,
    MAX_ARROWS,
    MIN_ARROW_RANGE,
    Status,
)
from .engine.turn import Action
from .logging import get_logger
from .session import GameSession

logger = get_logger(__name__)

INSTRUCTIONS = f"""\
Welcome to 'Hunt the Wumpus'

The Wumpus lives in a cave of 20 rooms.  Each room
has {TUNNELS_PER_ROOM} tunnels leading to other rooms.  (Look at a
dodecahedron to see how this works-If you don't know
what a dodecahedron is, ask someone)

Hazards:

Bottomless Pits - Two rooms have bottomless pits in them
if you go there, you fall into the pit (and lose!)

Superbats - Two other rooms have super bats. If you go
there, a bat grabs you and takes you to some other room
at random (which might be troublesome)

Wumpus - The wumpus is not bothered by the hazards (he
has sucker feet and is too big for a bat to lift).
Usually he is asleep.  Two things that wake him up:
your entering his room, or your shooting an arrow.
If the wumpus wakes, he moves (P=.75) one room or
stays still (P=.25). After that, if he is where you are
he eats you up (and you lose!)

You - Each turn you may move or shoot a crooked arrow.
Moving: You can go one room (thru one tunnel).
Arrows: You have {MAX_ARROWS} arrows.
Each arrow can go from {MIN_ARROW_RANGE} to {MAX_ARROW_RANGE} rooms.  You aim by telling
the computer the rooms you want the arrow to go to.  If
the arrow can't go that way (i.e. no tunnel) it moves at
random to the next room. If the arrow hits the Wumpus,
you win.  If it hits you, you lose.

Warnings:

When you are one room away from the Wumpus or a hazard,
the computer says:
\tWumpus - 'You smell a Wumpus!'
\tBat - 'You hear bats nearby!'
\tPit - 'You feel a draft!'
"""

FINAL_MESSAGES = {
    Status.WUMPUS_DEAD: "Hee Hee Hee - The Wumpus'll getcha next time!!",
    Status.HUNTER_DEAD: "Ha Ha Ha - You Lose!",
    Status.QUIT: "You give up and are magically returned to safety in shame!",
}

ACTIONS = {"S": Action.SHOOT, "M": Action.MOVE, "Q": Action.QUIT}


class InvalidInput(ValueError):
    """Input the player has to be asked for again. The message says why."""


def _join_rooms(rooms: Sequence[int]) -> str:
    numbers = [str(room + 1) for room in rooms]
    if len(numbers) < 3:
        return " and ".join(numbers)
    return ", ".join(numbers[:-1]) + ", and " + numbers[-1]


def _quiver(event: Event) -> str:
    if event.count == 0:
        return "You have no more arrows!"
    if event.count == 1:
        return "You only have one more arrow!"
    return f"You have {event.count} arrows."


# ARROW_ENTERS is left out on purpose: the hunter can't see the arrow fly.
MESSAGES: dict[EventKind, Callable[[Event], str]] = {
    EventKind.LOCATION: lambda e: f"\nYou are in room {e.room + 1}.",
    EventKind.TUNNELS: lambda e: f"Tunnels lead to {_join_rooms(e.rooms)}.",
    EventKind.SMELL_WUMPUS: lambda e: "You smell a Wumpus!",
    EventKind.FEEL_DRAFT: lambda e: "You feel a draft!",
    EventKind.HEAR_BATS: lambda e: "You hear bats nearby!",
    EventKind.QUIVER: _quiver,
    EventKind.NO_TUNNEL: lambda e: "You can't get there from here!",
    EventKind.OUT_OF_ARROWS: lambda e: "Unfortunately, you are out of arrows!",
    EventKind.ARROW_HIT_HUNTER: lambda e: "\nOh, no! You were hit by your own arrow!",
    EventKind.ARROW_HIT_WUMPUS: lambda e: "\nWhap! Your arrow hit a wumpus!",
    EventKind.ARROW_MISSED: lambda e: "\nYou missed!",
    EventKind.WUMPUS_WAKES: lambda e: "The Wumpus woke up!",
    EventKind.WUMPUS_MOVES: lambda e: "The Wumpus is moving to a new room!",
    EventKind.WUMPUS_ATTACKS: lambda e: "The Wumpus attacks you!",
    EventKind.BUMPED_WUMPUS: lambda e: "\nOops! You bumped into a Wumpus!",
    EventKind.SNATCHED_BY_BATS: lambda e: (
        "\nZap! A superbat snatched you!  Elsewhere for you!"
    ),
    EventKind.FELL_IN_PIT: lambda e: "\nYyyiiiiieeeeee .... you fell into a pit!",
}


def render(events: Sequence[Event]) -> list[str]:
    """Turn engine events into lines of text, skipping silent ones."""
    return [MESSAGES[event.kind](event) for event in events if event.kind in MESSAGES]


def parse_room(text: str) -> int:
    """Parse a 1-based room number typed by the player into a room id."""
    try:
        return int(text.strip()) - 1
    except ValueError:
        raise InvalidInput("Please enter a number!") from None


def parse_range(text: str) -> int:
    try:
        distance = int(text.strip())
    except ValueError:
        raise InvalidInput("Please enter a number!") from None
    if distance < MIN_ARROW_RANGE:
        raise InvalidInput(
            "An arrow must be shot a distance of at least one room!"
        )
    if distance > MAX_ARROW_RANGE:
        raise InvalidInput(
            "Your bow isn't strong enough to shoot an arrow that far!"
        )
    return distance


def validate_path_entry(room: int, path: Sequence[int], hunter_room: int) -> int:
    """Reject aiming at yourself or bending the arrow straight back."""
    if room == hunter_room:
        raise InvalidInput("You cannot try to commit suicide!")
    if len(path) > 1 and path[-2] == room:
        raise InvalidInput("Your arrows are not that crooked!")
    return room


class ConsolePlayer:
    """Player that reads answers from a text stream and prints narration."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        """Print a prompt and read one line. Raises EOFError at end of input."""
        self.stdout.write(f"{prompt} ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def ask_letter(self, prompt: str) -> str:
        """Ask until the answer is non-empty; return its first letter upper-cased."""
        answer = ""
        while not answer:
            answer = self.ask(prompt).strip().upper()
        return answer[0]

    def ask_yes_no(self, prompt: str) -> bool:
        try:
            return self.ask_letter(prompt) == "Y"
        except EOFError:
            return False

    def narrate(self, events: Sequence[Event]) -> None:
        for line in render(events):
            self.say(line)

    def choose_action(self) -> Action:
        while True:
            try:
                letter = self.ask_letter("\nShoot, move, or quit (S,M,Q)?")
            except EOFError:
                return Action.QUIT
            if letter in ACTIONS:
                return ACTIONS[letter]

    def choose_room(self) -> int | None:
        try:
            return parse_room(self.ask("Where to?"))
        except InvalidInput:
            self.say("That's not a room number!")
            return None

    def choose_range(self) -> int:
        while True:
            try:
                return parse_range(self.ask("Number of rooms?"))
            except InvalidInput as e:
                self.say(str(e))

    def choose_path_entry(
        self, index: int, path: Sequence[int], hunter_room: int
    ) -> int:
        while True:
            try:
                room = parse_room(self.ask(f"Room {index + 1} ?"))
                return validate_path_entry(room, path, hunter_room)
            except InvalidInput as e:
                self.say(str(e))


def run(session: GameSession, player: ConsolePlayer, instructions: str = "ask") -> None:
    """Play rounds on ``session`` until the player declines a replay."""
    player.say("Wumpus\n")
    if instructions == "always" or (
        instructions == "ask" and player.ask_yes_no("Instructions (Y-N)?")
    ):
        player.say(INSTRUCTIONS)

    while True:
        player.say("\nHunt the Wumpus")
        try:
            status = session.play_round(player)
        except EOFError:
            logger.info("input_closed", round=session.rounds_played + 1)
            player.say(f"\n{FINAL_MESSAGES[Status.QUIT]}")
            break
        player.say(f"\n{FINAL_MESSAGES[status]}")
        if not player.ask_yes_no(
            "\nWould you like to play again with the same set-up (Y/N)?"
        ):
            break
        session.replay()

    player.say("\nThank you for playing 'Hunt the Wumpus'!")
