"""
Exact odds for the rest of a round.

`project` explores every order in which the remaining dice can come out
of the pyramid together with every face each die can show. All branches
are equally likely, so the chance of a camel leading is the average of
its chances over the branches, computed exactly. The search is memoized
on `(race, dice)`: different throw orders that reach the same race with
the same dice left share one sub-computation.
"""

from collections import Counter
from collections.abc import Mapping
from functools import reduce
import logging
from types import MappingProxyType

from camelup import config
from camelup.algebra import Counting, Exact, add, rational
from camelup.camel import Face
from camelup.dice import Dice
from camelup.exceptions import UnknownToken

LOGGER = logging.getLogger(__name__)


class Chances(Mapping):
    """The probability, per camel of the race, of holding a placing at the end of the round."""

    def __init__(self, values):
        self._values = dict(values)

    def __getitem__(self, camel):
        return self._values[camel]

    def __iter__(self):
        return iter(sorted(self._values))

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return ("Chances<"
                + ", ".join(f"{camel.label}: {p}" for camel, p in self.items())
                + ">")

    def total(self):
        return reduce(add, self._values.values(), rational(0))


class Projector:
    """
    One search over the throws left in a round.

    The memo table maps `(race, dice)` to the distribution found for it.
    Tables are kept apart per semiring, placing and off-track policy so
    a caller-supplied `cache` can be shared between projections.
    """

    def __init__(self, semiring, placing, off_track, memoize=True, cache=None):
        self.semiring = semiring
        self.placing = placing
        self.off_track = off_track
        self.memoize = memoize
        cache = {} if cache is None else cache
        self.table = cache.setdefault(
            (type(semiring).__name__, placing, off_track), {})
        self.points = {}
        self.hits = 0
        self.misses = 0

    def run(self, race, dice):
        missing = dice.camels - race.tokens
        if missing:
            raise UnknownToken(missing)
        self.placing.check(race)

        LOGGER.debug("Projecting `%s` with dice `%s` for the %s.",
                     race, dice, self.placing.value)
        values = self.search(race, dice)
        LOGGER.debug("Search done: %s positions cached, %s hits, %s misses.",
                     len(self.table), self.hits, self.misses)
        return dict(values)

    def point(self, chosen, tokens):
        """The distribution putting all weight on `chosen`, shared between leaves."""
        key = (chosen, tokens)
        found = self.points.get(key)
        if found is None:
            s = self.semiring
            found = MappingProxyType(
                {camel: s.one() if camel == chosen else s.zero() for camel in tokens})
            self.points[key] = found
        return found

    def search(self, race, dice):
        s = self.semiring

        if dice.is_empty():
            return self.point(self.placing.pick(race), race.tokens)

        key = (race, dice)
        if self.memoize:
            cached = self.table.get(key)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1

        colors = dice.colors()
        branch_count = len(colors) * len(Face)
        children = []
        for camel in colors:
            rest = dice.without(camel)
            for face in Face:
                children.append(self.search(race.perform(camel, face, self.off_track), rest))

        # Entries are read-only: the table may be shared between projections.
        result = MappingProxyType({
            token: s.add_reduce(s.weighted(child[token], branch_count) for child in children)
            for token in race.tokens})

        if self.memoize:
            self.table[key] = result
        return result


def _projector(semiring, options):
    options = config.merged(options)
    return Projector(semiring,
                     placing=options["placing"],
                     off_track=options["off_track"],
                     memoize=options["memoize"],
                     cache=options["cache"])


def _as_dice(dice):
    return dice if isinstance(dice, Dice) else Dice(frozenset(dice))


def project(race, dice, **options) -> Chances:
    """
    Determine the chances of every camel in the race.

    Args:
        race: the race as it stands.
        dice: the dice still to be thrown this round.
        **options: `placing`, `off_track`, `memoize` and `cache`; see
            `camelup.config.defaults`.

    Returns:
        Chances covering every camel in the race. They sum to exactly one.

    Raises:
        UnknownToken: if a die belongs to a camel that is not in the race.
    """
    projector = _projector(Exact(), options)
    return Chances(projector.run(race, _as_dice(dice)))


def count_outcomes(race, dice, **options) -> Counter:
    """
    Count, per camel, the throw sequences after which it holds the placing.

    There are `len(dice)! * 3 ** len(dice)` sequences in all.
    """
    projector = _projector(Counting(), options)
    return Counter(projector.run(race, _as_dice(dice)))
