"""
Command line front end.

    $ camel-odds "r,,,y" ry
    (Yellow,5/6)(Red,1/6)
"""

import argparse
import logging
import sys

from rich.console import Console

from camelup import config
from camelup.camel import OffTrack, Placing
from camelup.dice import Dice
from camelup.exceptions import CamelUpError
from camelup.oracle import count_outcomes, project
from camelup.parse import parse_dice, parse_race
from camelup.render import bar_chart, chances_line, chances_table, ordered, race_board
from camelup.utils import configure_logging, report_error

LOGGER = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="camel-odds",
        description="Exact chances of each camel at the end of the current round.")
    parser.add_argument("race", help="the race, e.g. `ro,,y` (squares split by commas, camels bottom to top)")
    parser.add_argument("dice", nargs="?", default=None,
                        help="dice still in the pyramid, e.g. `ry` (default: every camel in the race)")
    parser.add_argument("--placing", choices=[p.value for p in Placing],
                        default=config.defaults["placing"].value,
                        help="which place to give chances for (default: winner)")
    parser.add_argument("--off-track", choices=[o.value for o in OffTrack],
                        default=None,
                        help="grow the track or stop camels on its last square "
                             "(default: CAMELUP_OFF_TRACK, else extend)")
    parser.add_argument("--counts", action="store_true",
                        help="print throw-sequence counts instead of chances")
    parser.add_argument("--table", action="store_true", help="print a table")
    parser.add_argument("--plot", action="store_true", help="print a bar chart")
    parser.add_argument("--show-race", action="store_true", help="draw the race first")
    parser.add_argument("-v", "--verbose", action="store_true", help="log the search")
    return parser


def main(argv=None, console=None):
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        configure_logging(logging.DEBUG if args.verbose else config.log_level_from_env())
        race = parse_race(args.race)
        dice = Dice(race.tokens) if args.dice is None else parse_dice(args.dice)
        options = {
            "placing": Placing(args.placing),
            "off_track": args.off_track and OffTrack(args.off_track),
        }
        chances = project(race, dice, **options)
        counts = count_outcomes(race, dice, **options) if args.counts or args.table else None
    except CamelUpError as exc:
        report_error(exc)
        return 1

    if args.show_race:
        console.print(race_board(race))

    pairs = ordered(chances, race)
    if args.table:
        console.print(chances_table(pairs, counts))
    elif args.counts:
        console.print(chances_line((camel, counts[camel]) for camel, _ in pairs),
                      markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(chances_line(pairs), markup=False, highlight=False, soft_wrap=True)

    if args.plot:
        console.print(bar_chart(pairs), markup=False, highlight=False, soft_wrap=True)

    LOGGER.debug("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
