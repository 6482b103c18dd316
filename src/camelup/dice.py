from dataclasses import dataclass

from camelup.camel import Camel
from camelup.exceptions import UnknownColor


@dataclass(frozen=True)
class Dice:
    """The dice still in the pyramid, one per camel that has yet to move this round."""

    camels: frozenset = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "camels",
                           frozenset(Camel(camel) for camel in self.camels))

    def is_empty(self) -> bool:
        return not self.camels

    def without(self, camel) -> "Dice":
        """
        Take a thrown die out of the pyramid.

        Raises:
            UnknownColor: if the die was already thrown.
        """
        if camel not in self.camels:
            raise UnknownColor(camel)
        return Dice(self.camels - {camel})

    def colors(self):
        return tuple(sorted(self.camels))

    def __len__(self):
        return len(self.camels)

    def __iter__(self):
        return iter(self.colors())

    def __contains__(self, camel):
        return camel in self.camels

    def __str__(self):
        return "".join(camel.code for camel in self.colors())
