"""
Camels, the track they race on and how a throw moves them.

A `Race` is a tuple of squares and every square is a stack of camels
listed bottom to top:

>>> race = Race(((Camel.RED, Camel.ORANGE), (Camel.YELLOW,)))
>>> move(race, Camel.RED, 1)
Race(squares=((), (<Camel.YELLOW: 2>, <Camel.RED: 0>, <Camel.ORANGE: 1>)))

Red carries orange along and both land on top of yellow.
"""

import enum
from dataclasses import dataclass
from typing import Tuple

from camelup.exceptions import InvalidRace, NoSuchPlacing, UnknownToken


class Camel(enum.IntEnum):
    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    WHITE = 4

    @property
    def code(self) -> str:
        return self.name[0].lower()

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_code(cls, code):
        for camel in cls:
            if camel.code == code:
                return camel
        raise ValueError(f"`{code}` is not a camel.")


class Face(enum.IntEnum):
    """The faces of a camel die, valued by the steps they move."""
    ONE = 1
    TWO = 2
    THREE = 3


class OffTrack(enum.Enum):
    """What happens to a unit that moves past the last square."""
    EXTEND = "extend"
    CLAMP = "clamp"


Stack = Tuple[Camel, ...]


@dataclass(frozen=True)
class Race:
    squares: Tuple[Stack, ...]

    def __post_init__(self):
        squares = tuple(tuple(Camel(camel) for camel in square)
                        for square in self.squares)
        object.__setattr__(self, "squares", squares)

        seen = [camel for square in squares for camel in square]
        if not seen:
            raise InvalidRace("A race needs at least one camel.")
        if len(seen) != len(set(seen)):
            doubled = sorted({camel for camel in seen if seen.count(camel) > 1})
            raise InvalidRace(
                "Camels appear more than once: "
                + ", ".join(camel.label for camel in doubled) + ".")

    @classmethod
    def _trusted(cls, squares):
        # For squares rearranged from an already valid race.
        race = object.__new__(cls)
        object.__setattr__(race, "squares", squares)
        return race

    def __len__(self):
        return len(self.squares)

    def __str__(self):
        return ",".join("".join(camel.code for camel in square)
                        for square in self.squares)

    @property
    def tokens(self) -> frozenset:
        return frozenset(camel for square in self.squares for camel in square)

    def position(self, camel):
        """
        Locate a camel.

        Returns:
            A pair `(square, height)` with height 0 at the bottom of the stack.

        Raises:
            UnknownToken: if the camel is not in the race.
        """
        for index, square in enumerate(self.squares):
            if camel in square:
                return index, square.index(camel)
        raise UnknownToken([camel])

    def perform(self, camel, face, off_track=OffTrack.EXTEND):
        return move(self, camel, int(face), off_track)


def ranking(race):
    """All camels of the race, the leader first and last place last."""
    return tuple(camel
                 for square in reversed(race.squares)
                 for camel in reversed(square))


def leader(race):
    return ranking(race)[0]


def runner_up(race):
    order = ranking(race)
    return order[1] if len(order) > 1 else None


def loser(race):
    return ranking(race)[-1]


class Placing(enum.Enum):
    """Which place in the ranking a projection asks about."""
    WINNER = "winner"
    RUNNER_UP = "runner-up"
    LOSER = "loser"

    def check(self, race):
        if self is Placing.RUNNER_UP and len(race.tokens) < 2:
            raise NoSuchPlacing("A race with a single camel has no runner-up.")

    def pick(self, race):
        if self is Placing.WINNER:
            return leader(race)
        if self is Placing.RUNNER_UP:
            return runner_up(race)
        return loser(race)


def move(race, camel, distance, off_track=OffTrack.EXTEND):
    """
    Move a camel along with everything stacked on top of it.

    The moving unit keeps its order and lands on top of whatever already
    occupies the destination square. Camels beneath the mover stay put.

    Args:
        race: the race before the move.
        camel: the camel whose die was thrown.
        distance: how many squares to advance.
        off_track: how to treat a destination past the last square.

    Returns:
        A new race. `race` itself is never modified.
    """
    if distance < 0:
        raise ValueError(f"Camels only move forwards, not {distance}.")

    source, height = race.position(camel)
    if distance == 0:
        return race

    squares = list(race.squares)
    unit = squares[source][height:]
    squares[source] = squares[source][:height]

    destination = source + distance
    if destination >= len(squares):
        if off_track is OffTrack.CLAMP:
            destination = len(squares) - 1
        else:
            squares.extend(() for _ in range(destination - len(squares) + 1))

    squares[destination] = squares[destination] + unit
    return Race._trusted(tuple(squares))
