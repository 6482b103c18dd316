"""
Reading races and dice from their short descriptions.

A race lists its squares from the back of the track to the front,
separated by `,`. Each square lists its camels bottom to top by their
letter: `r`ed, `o`range, `y`ellow, `g`reen and `w`hite. An empty segment
is an empty square, so `"ro,,y"` has red under orange on the first
square and yellow two squares ahead.

Dice are a run of camel letters, one per die still in the pyramid.
"""

from camelup.camel import Camel, Race
from camelup.dice import Dice
from camelup.exceptions import DiceParseError, RaceParseError

DIVIDER = ","
TRACK_FEATURES = {"+": "an oasis", "-": "a fata morgana"}


def _trimmed(text):
    stripped = text.strip()
    return stripped, text.find(stripped) if stripped else 0


def _camel(char, text, column, error):
    try:
        return Camel.from_code(char)
    except ValueError:
        raise error(f"`{char}` is not a marker.", text, column) from None


def parse_race(text) -> Race:
    stripped, offset = _trimmed(text)

    squares = [[]]
    seen = set()
    for index, char in enumerate(stripped):
        column = offset + index
        if char == DIVIDER:
            squares.append([])
            continue
        if char in TRACK_FEATURES:
            raise RaceParseError(
                f"`{char}` marks {TRACK_FEATURES[char]}, which camelup does not model.",
                text, column)
        camel = _camel(char, text, column, RaceParseError)
        if camel in seen:
            raise RaceParseError(f"{camel.label} is already in the race.", text, column)
        seen.add(camel)
        squares[-1].append(camel)

    if not seen:
        raise RaceParseError("A race needs at least one camel.", text, None)

    return Race(tuple(tuple(square) for square in squares))


def parse_dice(text) -> Dice:
    stripped, offset = _trimmed(text)

    camels = set()
    for index, char in enumerate(stripped):
        column = offset + index
        if char == DIVIDER or char in TRACK_FEATURES:
            raise DiceParseError(f"`{char}` is a marker but not a camel.", text, column)
        camel = _camel(char, text, column, DiceParseError)
        if camel in camels:
            raise DiceParseError(f"The {camel.label} die is listed twice.", text, column)
        camels.add(camel)

    return Dice(frozenset(camels))
