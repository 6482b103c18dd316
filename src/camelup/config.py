"""Option defaults for projections, with environment overrides."""

import logging
import os

from camelup.camel import OffTrack, Placing
from camelup.exceptions import ConfigError

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def off_track_from_env(environ=os.environ):
    name = environ.get("CAMELUP_OFF_TRACK", OffTrack.EXTEND.value)
    try:
        return OffTrack(name.lower())
    except ValueError:
        raise ConfigError(
            f"I don't recognize the off-track policy `{name}`. "
            "Set CAMELUP_OFF_TRACK to extend or clamp.") from None


def log_level_from_env(environ=os.environ):
    name = environ.get("CAMELUP_LOG_LEVEL", "warning")
    if name.lower() not in LOG_LEVELS:
        raise ConfigError(
            f"I don't recognize the log level `{name}`. "
            f"Set CAMELUP_LOG_LEVEL to one of {', '.join(LOG_LEVELS)}.")
    return LOG_LEVELS[name.lower()]


# An `off_track` of None is read from CAMELUP_OFF_TRACK when a projection starts.
defaults = {
    "placing": Placing.WINNER,
    "off_track": None,
    "memoize": True,
    "cache": None,
}


def merged(options):
    unknown = set(options) - set(defaults)
    if unknown:
        raise TypeError(f"Unknown projection options: {', '.join(sorted(unknown))}.")
    options = defaults | options
    if options["off_track"] is None:
        options["off_track"] = off_track_from_env()
    return options
