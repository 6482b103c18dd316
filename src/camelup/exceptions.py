"""Exceptions raised by camelup"""


class CamelUpError(Exception):
    """Base class for every error camelup raises"""


class InvalidFraction(CamelUpError, ZeroDivisionError):
    """A rational was built with a zero denominator"""


class UnknownColor(CamelUpError, KeyError):
    """A die was removed from a dice set that does not hold it"""

    def __init__(self, camel):
        super().__init__(f"The {camel.label} die is not among the remaining dice.")
        self.camel = camel

    def __str__(self):
        # KeyError would quote the message
        return self.args[0]


class UnknownToken(CamelUpError):
    """Camels referenced that are not in the race"""

    def __init__(self, camels):
        camels = sorted(camels)
        names = ", ".join(camel.label for camel in camels)
        super().__init__(f"Not in the race: {names}.")
        self.camels = camels


class InvalidRace(CamelUpError, ValueError):
    """A race that breaks the one-camel-one-place rule"""


class NoSuchPlacing(CamelUpError):
    """The requested placing does not exist for this many camels"""


class ParseError(CamelUpError, ValueError):
    """Errors found while reading a race or dice description"""

    def __init__(self, message, text=None, column=None):
        super().__init__(message)
        self.text = text
        self.column = column


class RaceParseError(ParseError):
    """Errors in a race description"""


class DiceParseError(ParseError):
    """Errors in a dice description"""


class ConfigError(CamelUpError, NameError):
    """An environment setting camelup does not recognize"""
