"""Presenting races and chances on a terminal."""

from functools import cmp_to_key

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
import termplotlib as tpl

from camelup.algebra import compare
from camelup.camel import Camel, ranking

CAMEL_STYLES = {
    Camel.RED: "bold red",
    Camel.ORANGE: "bold dark_orange",
    Camel.YELLOW: "bold yellow",
    Camel.GREEN: "bold green",
    Camel.WHITE: "bold white",
}


def ordered(chances, race):
    """
    Chances by descending probability, ties broken by the current race
    order with the leader first.
    """
    place = {camel: index for index, camel in enumerate(ranking(race))}

    def by_odds(left, right):
        return (-compare(left[1], right[1])
                or place[left[0]] - place[right[0]])

    return sorted(chances.items(), key=cmp_to_key(by_odds))


def chances_line(pairs):
    return "".join(f"({camel.label},{value})" for camel, value in pairs)


def chances_table(pairs, counts=None):
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Camel")
    table.add_column("Chance", justify="right")
    if counts is not None:
        table.add_column("Sequences", justify="right")

    for camel, value in pairs:
        row = [Text(camel.label, style=CAMEL_STYLES[camel]), str(value)]
        if counts is not None:
            row.append(str(counts[camel]))
        table.add_row(*row)
    return table


def bar_chart(pairs):
    # Bar lengths only; the labels carry the exact values.
    fig = tpl.figure()
    fig.barh([float(value) for _, value in pairs],
             [f"{camel.label} {value}" for camel, value in pairs],
             show_vals=False,
             force_ascii=True)
    return fig.get_string()


def race_board(race):
    """Draw the track with every stack standing on its square."""
    height = max(len(square) for square in race.squares)
    board = Text()
    for level in reversed(range(height)):
        for square in race.squares:
            if level < len(square):
                camel = square[level]
                board.append("  ")
                board.append(camel.code.upper(), style=CAMEL_STYLES[camel])
                board.append(" ")
            else:
                board.append("    ")
        board.append("\n")
    board.append("".join(f" {index + 1:2} " for index in range(len(race))))
    return Panel(board, title=str(race), expand=False)
