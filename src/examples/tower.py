# Green, yellow, orange and red share the first square, green at the
# bottom, while white waits three squares ahead. Every die is still in
# the pyramid.
import logging
from rich.logging import RichHandler, Console

if 0:
    console = Console(force_terminal=True)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(markup=True, show_time=False, console=console)])

import time

import camelup as cu
from camelup.render import chances_line, ordered

race = cu.parse_race("gyor,,,w")
dice = cu.parse_dice("gyorw")

for placing in cu.Placing:
    start = time.perf_counter()
    result = cu.project(race, dice, placing=placing)
    end = time.perf_counter()
    print(f"{placing.value:>9}: {chances_line(ordered(result, race))}")
    print(f"Time taken: {end - start:.6f} seconds")
