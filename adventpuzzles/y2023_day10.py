"""Pipe maze: the length of the loop running through the start tile."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

_START = "S"


class Direction(IntEnum):
    """Compass directions, clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self):
        """The direction pointing the other way."""
        return Direction((self + 2) % 4)


@dataclass(frozen=True)
class Tile:
    """A grid tile; pipes connect two directions."""

    is_pipe: bool
    end_a: Optional[Direction] = None
    end_b: Optional[Direction] = None


@dataclass(frozen=True)
class Coordinates:
    """A position in the grid."""

    row: int
    column: int


_GROUND = Tile(False)

_PIPES = {
    "|": Tile(True, Direction.NORTH, Direction.SOUTH),
    "-": Tile(True, Direction.EAST, Direction.WEST),
    "L": Tile(True, Direction.NORTH, Direction.EAST),
    "J": Tile(True, Direction.NORTH, Direction.WEST),
    "7": Tile(True, Direction.SOUTH, Direction.WEST),
    "F": Tile(True, Direction.SOUTH, Direction.EAST),
}

_OFFSETS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


def parse_grid(lines):
    """Turn each character of each line into a :class:`Tile`."""
    return [[_PIPES.get(char, _GROUND) for char in line] for line in lines]


def find_start(grid):
    """Return the coordinates of the ``S`` in the grid lines."""
    for row, line in enumerate(grid):
        column = line.find(_START)
        if column >= 0:
            return Coordinates(row, column)
    raise ValueError("grid has no start tile")


def find_next_direction(direction, tile):
    """Return the direction leaving ``tile`` after entering it moving ``direction``.

    Returns ``None`` when the tile does not connect to where we came from.
    """
    entry = direction.opposite
    if tile.end_a == entry:
        return tile.end_b
    if tile.end_b == entry:
        return tile.end_a
    return None


def _move(position, direction):
    row_change, column_change = _OFFSETS[direction]
    return Coordinates(position.row + row_change, position.column + column_change)


def _tile_at(grid, position):
    if 0 <= position.row < len(grid) and 0 <= position.column < len(grid[position.row]):
        return grid[position.row][position.column]
    return _GROUND


def number_of_steps(lines):
    """Return the number of steps to the point of the loop farthest from the start."""
    start = find_start(lines)
    grid = parse_grid(lines)

    direction = next(
        (
            candidate
            for candidate in Direction
            if find_next_direction(candidate, _tile_at(grid, _move(start, candidate)))
            is not None
        ),
        None,
    )
    if direction is None:
        raise ValueError("no pipe connects to the start tile")

    position = _move(start, direction)
    steps = 1
    while position != start:
        next_direction = find_next_direction(direction, _tile_at(grid, position))
        if next_direction is None:
            raise ValueError(f"pipe loop is broken at {position}")
        direction = next_direction
        position = _move(position, direction)
        steps += 1

    return steps // 2


def solve(text):
    """Return the answer for the given puzzle input."""
    lines = [line for line in text.splitlines() if line]
    return (number_of_steps(lines),)