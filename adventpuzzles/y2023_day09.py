"""Oasis readings: extrapolating histories forwards and backwards."""

import re
from functools import reduce
from itertools import pairwise

_VALUE = re.compile(r"-?\d+", re.ASCII)


def _parse_values(history):
    return [int(match) for match in _VALUE.findall(history)]


def extrapolation_for(values):
    """Return the differences between each pair of neighbouring values."""
    return [later - earlier for earlier, later in pairwise(values)]


def extrapolations_for(values):
    """Return successive difference rows, ending with the first row of zeros."""
    rows = []
    current = list(values)
    while any(current):
        current = extrapolation_for(current)
        rows.append(current)
    return rows


def _rows(history):
    """Return the history's values followed by all its difference rows."""
    values = _parse_values(history)
    extrapolations = extrapolations_for(values)
    rows = [values, *extrapolations]
    if not extrapolations or not all(rows):
        raise ValueError(f"cannot extrapolate history: {history!r}")
    return rows


def prediction_for(history):
    """Return the next value of the history."""
    return sum(row[-1] for row in _rows(history))


def backward_prediction_for(history):
    """Return the value that would come before the first value of the history."""
    rows = _rows(history)
    return reduce(lambda below, row: row[0] - below, reversed(rows[:-1]), rows[-1][0])


def sum_of_predictions(histories):
    """Sum the next values of all histories."""
    return sum(prediction_for(history) for history in histories)


def sum_of_backward_predictions(histories):
    """Sum the previous values of all histories."""
    return sum(backward_prediction_for(history) for history in histories)


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    histories = [line for line in text.splitlines() if line]
    return sum_of_predictions(histories), sum_of_backward_predictions(histories)