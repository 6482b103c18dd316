"""
Exact odds for Camel Up.

>>> race = parse_race("r,,w")
>>> dice = parse_dice("rw")
>>> chances = project(race, dice)
>>> chances[Camel.WHITE] > chances[Camel.RED]
True
"""

from camelup.algebra import Rational, rational, add, scale, compare
from camelup.camel import Camel, Face, OffTrack, Placing, Race, leader, loser, move, ranking, runner_up
from camelup.dice import Dice
from camelup.exceptions import (
    CamelUpError,
    ConfigError,
    DiceParseError,
    InvalidFraction,
    InvalidRace,
    NoSuchPlacing,
    ParseError,
    RaceParseError,
    UnknownColor,
    UnknownToken,
)
from camelup.oracle import Chances, Projector, count_outcomes, project
from camelup.parse import parse_dice, parse_race

__all__ = [
    "Rational", "rational", "add", "scale", "compare",
    "Camel", "Face", "OffTrack", "Placing", "Race",
    "leader", "loser", "move", "ranking", "runner_up",
    "Dice", "Chances", "Projector", "count_outcomes", "project",
    "parse_dice", "parse_race",
    "CamelUpError", "ConfigError", "DiceParseError", "InvalidFraction", "InvalidRace",
    "NoSuchPlacing", "ParseError", "RaceParseError", "UnknownColor", "UnknownToken",
]
