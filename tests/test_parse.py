import pytest

import camelup as cu
from camelup import Camel

R, O, Y, G, W = Camel.RED, Camel.ORANGE, Camel.YELLOW, Camel.GREEN, Camel.WHITE


class TestParseRace:

    def test_squares(self):
        race = cu.parse_race("r,,,y")
        assert race.squares == ((R,), (), (), (Y,))

    def test_stacks_bottom_to_top(self):
        race = cu.parse_race("gyor,,,w")
        assert race.squares[0] == (G, Y, O, R)

    def test_leading_and_trailing_squares_kept(self):
        race = cu.parse_race(",r,")
        assert race.squares == ((), (R,), ())

    def test_whitespace(self):
        assert cu.parse_race("  r,y \n") == cu.parse_race("r,y")

    def test_not_a_marker(self):
        with pytest.raises(cu.RaceParseError, match=r".*`x` is not a marker.*") as info:
            cu.parse_race("r,,x")
        assert info.value.column == 3
        assert info.value.text == "r,,x"

    def test_column_counts_leading_whitespace(self):
        with pytest.raises(cu.RaceParseError) as info:
            cu.parse_race("  rq")
        assert info.value.column == 3

    def test_oasis(self):
        with pytest.raises(cu.RaceParseError, match=r".*oasis.*") as info:
            cu.parse_race("r,+,y")
        assert info.value.column == 2

    def test_fata_morgana(self):
        with pytest.raises(cu.RaceParseError, match=r".*fata morgana.*"):
            cu.parse_race("r,-,y")

    def test_duplicate(self):
        with pytest.raises(cu.RaceParseError, match=r".*Red is already.*") as info:
            cu.parse_race("r,r")
        assert info.value.column == 2

    def test_no_camels(self):
        with pytest.raises(cu.RaceParseError, match=r".*at least one camel.*"):
            cu.parse_race(",,,")

    def test_empty(self):
        with pytest.raises(cu.RaceParseError):
            cu.parse_race("")

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            cu.parse_race("R")


class TestParseDice:

    def test_dice(self):
        assert cu.parse_dice("ryg") == cu.Dice({R, Y, G})

    def test_empty(self):
        assert cu.parse_dice("").is_empty()

    def test_duplicate(self):
        with pytest.raises(cu.DiceParseError, match=r".*Red die is listed twice.*") as info:
            cu.parse_dice("rr")
        assert info.value.column == 1

    def test_not_a_camel(self):
        with pytest.raises(cu.DiceParseError, match=r".*not a camel.*") as info:
            cu.parse_dice("r,y")
        assert info.value.column == 1

    def test_not_a_marker(self):
        with pytest.raises(cu.DiceParseError, match=r".*not a marker.*"):
            cu.parse_dice("rz")
