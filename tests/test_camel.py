import pytest

import camelup as cu
from camelup import Camel, Face, OffTrack, Race

R, O, Y, G, W = Camel.RED, Camel.ORANGE, Camel.YELLOW, Camel.GREEN, Camel.WHITE


class TestCamel:

    def test_codes(self):
        assert [camel.code for camel in Camel] == ["r", "o", "y", "g", "w"]
        assert Camel.from_code("g") is G

    def test_labels(self):
        assert R.label == "Red"
        assert W.label == "White"

    def test_not_a_camel(self):
        with pytest.raises(ValueError, match=r".*not a camel.*"):
            Camel.from_code("x")

    def test_faces(self):
        assert [int(face) for face in Face] == [1, 2, 3]


class TestRace:

    def test_structural_equality(self):
        left = Race(((R,), (), (Y,)))
        right = cu.parse_race("r,,y")
        assert left == right
        assert hash(left) == hash(right)
        assert {left: 1}[right] == 1

    def test_stack_order_matters(self):
        assert cu.parse_race("ry") != cu.parse_race("yr")

    def test_str(self):
        assert str(cu.parse_race("ro,,y")) == "ro,,y"

    def test_tokens(self):
        assert cu.parse_race("ro,,y").tokens == {R, O, Y}

    def test_position(self):
        race = cu.parse_race("g,ro,,y")
        assert race.position(O) == (1, 1)
        assert race.position(Y) == (3, 0)

    def test_duplicates_rejected(self):
        with pytest.raises(cu.InvalidRace, match=r".*Red.*"):
            Race(((R,), (R,)))

    def test_no_camels_rejected(self):
        with pytest.raises(cu.InvalidRace):
            Race(((), ()))


class TestRanking:

    def test_ranking(self):
        race = cu.parse_race("r,y,g")
        assert cu.ranking(race) == (G, Y, R)
        assert cu.leader(race) is G
        assert cu.runner_up(race) is Y
        assert cu.loser(race) is R

    def test_stack_decides_ties(self):
        race = cu.parse_race("w,ryg")
        assert cu.ranking(race) == (G, Y, R, W)

    def test_single_camel(self):
        race = cu.parse_race(",o")
        assert cu.leader(race) is O
        assert cu.runner_up(race) is None
        assert cu.loser(race) is O


class TestMove:

    def test_roll_one(self):
        race = cu.parse_race("ro,y")
        assert cu.move(race, R, 1) == cu.parse_race(",yro")

    def test_roll_two(self):
        race = cu.parse_race("ro,y")
        assert cu.move(race, R, 2) == cu.parse_race(",y,ro")

    def test_roll_three(self):
        race = cu.parse_race("ro,y")
        assert race.perform(R, Face.THREE) == cu.parse_race(",y,,ro")

    def test_carry_along(self):
        race = cu.parse_race("ry,,g")
        moved = cu.move(race, R, 1)
        assert moved.squares[1] == (R, Y)
        assert moved.position(G) == race.position(G)

    def test_lower_camels_stay(self):
        race = cu.parse_race("gro")
        moved = cu.move(race, R, 1)
        assert moved.squares == ((G,), (R, O))

    def test_landing_on_top(self):
        race = cu.parse_race("w,yg")
        moved = cu.move(race, W, 1)
        assert moved.squares[1] == (Y, G, W)

    def test_race_left_untouched(self):
        race = cu.parse_race("ro,y")
        cu.move(race, R, 2)
        assert race == cu.parse_race("ro,y")

    def test_moved_race_matches_a_built_one(self):
        moved = cu.move(cu.parse_race("ry,,g"), R, 2)
        built = Race(((), (), (G, R, Y)))
        assert moved == built
        assert hash(moved) == hash(built)
        assert all(type(camel) is Camel for square in moved.squares for camel in square)
        assert {moved: 1}[built] == 1

    def test_zero_distance(self):
        race = cu.parse_race("ro,y")
        assert cu.move(race, R, 0) is race

    def test_negative_distance(self):
        with pytest.raises(ValueError, match=r".*forwards.*"):
            cu.move(cu.parse_race("r,y"), R, -1)

    def test_unknown_camel(self):
        with pytest.raises(cu.UnknownToken, match=r".*Green.*"):
            cu.move(cu.parse_race("r,y"), G, 1)

    def test_extend(self):
        moved = cu.move(cu.parse_race("r,y"), Y, 3)
        assert len(moved) == 5
        assert moved.position(Y) == (4, 0)

    def test_clamp(self):
        moved = cu.move(cu.parse_race("r,,y"), R, 3, OffTrack.CLAMP)
        assert moved.squares == ((), (), (Y, R))

    def test_clamp_at_the_end(self):
        race = cu.parse_race("r,yg")
        assert cu.move(race, Y, 2, OffTrack.CLAMP) == race


class TestPlacing:

    def test_pick(self):
        race = cu.parse_race("r,y,g")
        assert cu.Placing.WINNER.pick(race) is G
        assert cu.Placing.RUNNER_UP.pick(race) is Y
        assert cu.Placing.LOSER.pick(race) is R

    def test_no_runner_up(self):
        with pytest.raises(cu.NoSuchPlacing):
            cu.Placing.RUNNER_UP.check(cu.parse_race("r"))
