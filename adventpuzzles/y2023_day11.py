"""Cosmic expansion: distances between galaxies in an expanding universe."""

from dataclasses import dataclass
from itertools import combinations

_EMPTY = "."
_GALAXY = "#"
_EXPANDED = "x"


@dataclass(frozen=True)
class Coordinates:
    """A position in the universe."""

    row: int
    column: int


def _insert_after_empty(universe, fill):
    """Insert a line of ``fill`` after every empty row and column."""
    rows = list(universe)
    if not rows:
        raise ValueError("empty universe")
    width = len(rows[0])
    empty_rows = {index for index, row in enumerate(rows) if set(row) <= {_EMPTY}}
    empty_columns = {
        column
        for column in range(width)
        if all(row[column] == _EMPTY for row in rows)
    }

    widened = [
        "".join(
            char + fill if column in empty_columns else char
            for column, char in enumerate(row)
        )
        for row in rows
    ]
    new_width = len(widened[0])

    expanded = []
    for index, row in enumerate(widened):
        expanded.append(row)
        if index in empty_rows:
            expanded.append(fill * new_width)
    return expanded


def expand_universe(universe):
    """Return the universe with every empty row and column doubled."""
    return _insert_after_empty(universe, _EMPTY)


def mark_expansion(universe):
    """Return the universe with an ``x`` line after every empty row and column."""
    return _insert_after_empty(universe, _EXPANDED)


def _galaxies(universe):
    return [
        Coordinates(row, column)
        for row, line in enumerate(universe)
        for column, char in enumerate(line)
        if char == _GALAXY
    ]


def find_shortest_path(a, b):
    """Return the Manhattan distance between two positions."""
    return abs(a.row - b.row) + abs(a.column - b.column)


def find_expanded_path(a, b, universe, expansion_factor):
    """Return the distance between two positions in a marked universe.

    Each ``x`` crossed adds ``expansion_factor - 1`` instead of 1. Rows are
    walked along ``a``'s column and columns along ``a``'s row.
    """

    def cost(char):
        return expansion_factor - 1 if char == _EXPANDED else 1

    low_row, high_row = sorted((a.row, b.row))
    low_column, high_column = sorted((a.column, b.column))
    vertical = sum(cost(universe[row][a.column]) for row in range(low_row, high_row))
    horizontal = sum(
        cost(universe[a.row][column]) for column in range(low_column, high_column)
    )
    return vertical + horizontal


def sum_of_shortest_paths(lines):
    """Sum the distances between every pair of galaxies after doubling empty space."""
    galaxies = _galaxies(expand_universe(lines))
    return sum(find_shortest_path(a, b) for a, b in combinations(galaxies, 2))


def sum_of_expanded_paths(lines, expansion_factor):
    """Sum pairwise galaxy distances when empty space grows by ``expansion_factor``."""
    universe = mark_expansion(lines)
    galaxies = _galaxies(universe)
    return sum(
        find_expanded_path(a, b, universe, expansion_factor)
        for a, b in combinations(galaxies, 2)
    )


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = [line for line in text.splitlines() if line]
    return sum_of_shortest_paths(lines), sum_of_expanded_paths(lines, 1_000_000)