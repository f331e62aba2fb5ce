"""Houses visited while delivering presents on an infinite grid."""

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A house on the grid."""

    x: int
    y: int


_ORIGIN = Position(0, 0)

_MOVES = {">": (1, 0), "<": (-1, 0), "^": (0, 1), "v": (0, -1)}


def _step(position, move):
    dx, dy = _MOVES.get(move, (0, 0))
    return Position(position.x + dx, position.y + dy)


def visit_houses(path):
    """Return how many times each house is visited by a single deliverer.

    Every character counts as a visit; characters that are not moves
    leave the deliverer where it is.
    """
    position = _ORIGIN
    visits = Counter({position: 1})
    for move in path:
        position = _step(position, move)
        visits[position] += 1
    return dict(visits)


def count_houses(path):
    """Return the number of distinct houses visited by a single deliverer."""
    return len(visit_houses(path))


def visit_houses_with_robot(path):
    """Return visit counts when two deliverers take turns following the path."""
    deliverers = [_ORIGIN, _ORIGIN]
    visits = Counter({_ORIGIN: 1})
    for turn, move in enumerate(path):
        mover = turn % 2
        deliverers[mover] = _step(deliverers[mover], move)
        visits[deliverers[mover]] += 1
    return dict(visits)


def count_houses_with_robot(path):
    """Return the number of distinct houses visited by both deliverers."""
    return len(visit_houses_with_robot(path))


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    return count_houses(text), count_houses_with_robot(text)