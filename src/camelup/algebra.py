from abc import ABC, abstractmethod
from fractions import Fraction
from functools import reduce

from camelup.exceptions import InvalidFraction

# Every probability camelup reports is a Fraction: immutable, hashable
# and always stored in lowest terms with a positive denominator.
Rational = Fraction


def rational(numerator: int, denominator: int = 1) -> Rational:
    """
    Build the rational `numerator / denominator`.

    Args:
        numerator: any integer.
        denominator: a non-zero integer.

    Returns:
        The rational in lowest terms.

    Raises:
        InvalidFraction: if `denominator` is zero.
    """
    if denominator == 0:
        raise InvalidFraction(f"{numerator}/0 has a zero denominator.")
    return Fraction(numerator, denominator)


def add(a: Rational, b: Rational) -> Rational:
    return a + b


def scale(a: Rational, n: int) -> Rational:
    """Multiply `a` by the weight `1/n`."""
    return a * rational(1, n)


def compare(a: Rational, b: Rational) -> int:
    """
    Order two rationals by cross-multiplication.

    Returns -1, 0 or 1 as `a` is less than, equal to or greater than `b`.
    """
    left = a.numerator * b.denominator
    right = b.numerator * a.denominator
    return (left > right) - (left < right)


class Semiring(ABC):
    """Operations on the probability axis."""

    @abstractmethod
    def zero(self):
        ...

    @abstractmethod
    def one(self):
        ...

    @abstractmethod
    def add(self, a, b):
        ...

    @abstractmethod
    def weighted(self, value, branch_count: int):
        """`value` as carried by one of `branch_count` equally likely branches."""
        ...

    def add_reduce(self, values):
        return reduce(self.add, values, self.zero())


class Exact(Semiring):
    """Probabilities as exact rationals."""

    def zero(self):
        return rational(0)

    def one(self):
        return rational(1)

    def add(self, a, b):
        return add(a, b)

    def weighted(self, value, branch_count):
        return scale(value, branch_count)


# The search visits every leaf of the throw tree with weight one, so
# summing under this semiring counts throw sequences.
class Counting(Semiring):

    def zero(self):
        return 0

    def one(self):
        return 1

    def add(self, a, b):
        return a + b

    def weighted(self, value, branch_count):
        del branch_count
        return value


__all__ = [
    "Rational", "rational", "add", "scale", "compare",
    "Semiring", "Exact", "Counting",
]
