"""Engine schematics: part numbers next to symbols and gears between two parts."""

import re
import unicodedata
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")
_GEAR_SYMBOL = "*"
_EMPTY = "."


@dataclass(frozen=True)
class Gear:
    """A ``*`` symbol adjacent to exactly two part numbers."""

    first_part: int
    second_part: int

    @property
    def ratio(self):
        """The product of the two part numbers."""
        return self.first_part * self.second_part


def number_positions(row):
    """Return ``(start, finish)`` column pairs, both inclusive, of each number in ``row``."""
    return [(match.start(), match.end() - 1) for match in _NUMBER.finditer(row)]


def contains_symbol(chars):
    """Return whether any character is punctuation or a symbol other than ``.``."""
    return any(
        char != _EMPTY and unicodedata.category(char)[0] in ("P", "S")
        for char in chars
    )


def _neighbours(top_row, row, bottom_row, column):
    """Yield the characters around ``column`` in the three rows."""
    if column > 0:
        yield top_row[column - 1]
        yield row[column - 1]
        yield bottom_row[column - 1]
    yield top_row[column]
    yield bottom_row[column]
    if column < len(row) - 1:
        yield top_row[column + 1]
        yield row[column + 1]
        yield bottom_row[column + 1]


def part_numbers(top_row, row, bottom_row):
    """Return the numbers in ``row`` whose first or last digit touches a symbol."""
    found = []
    for start, finish in number_positions(row):
        surrounding = [
            *_neighbours(top_row, row, bottom_row, start),
            *_neighbours(top_row, row, bottom_row, finish),
        ]
        if contains_symbol(surrounding):
            found.append(int(row[start : finish + 1]))
    return found


def _framed(rows):
    """Yield each row with the rows above and below it, padding the edges with dots."""
    for index, row in enumerate(rows):
        blank = _EMPTY * len(row)
        top_row = rows[index - 1] if index > 0 else blank
        bottom_row = rows[index + 1] if index + 1 < len(rows) else blank
        yield top_row, row, bottom_row


def part_number_sum(rows):
    """Sum every part number in the schematic."""
    return sum(sum(part_numbers(*frame)) for frame in _framed(rows))


def _adjacent_parts(row, symbol_index):
    return [
        int(row[start : finish + 1])
        for start, finish in number_positions(row)
        if start - 1 <= symbol_index <= finish + 1
    ]


def gears(top_row, row, bottom_row):
    """Return the gears found in ``row``, in column order."""
    found = []
    for symbol_index, char in enumerate(row):
        if char != _GEAR_SYMBOL:
            continue
        parts = [
            *_adjacent_parts(top_row, symbol_index),
            *_adjacent_parts(row, symbol_index),
            *_adjacent_parts(bottom_row, symbol_index),
        ]
        if len(parts) == 2:
            found.append(Gear(parts[0], parts[1]))
    return found


def gear_ratio_sum(rows):
    """Sum the ratios of every gear in the schematic."""
    return sum(gear.ratio for frame in _framed(rows) for gear in gears(*frame))


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    rows = [line for line in text.splitlines() if line]
    return part_number_sum(rows), gear_ratio_sum(rows)