"""Boat races: ways to beat the distance record by holding the button."""

import re
from dataclasses import dataclass
from math import prod

_NUMBER = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class Race:
    """A race lasting ``time`` milliseconds with the best distance so far."""

    time: int
    distance_record: int


def parse_races(time_line, distance_line):
    """Pair every time on ``time_line`` with the distance in the same column."""
    times = _NUMBER.findall(time_line)
    distances = _NUMBER.findall(distance_line)
    if len(distances) < len(times):
        raise ValueError("fewer distances than times")
    return [Race(int(time), int(distance)) for time, distance in zip(times, distances)]


def _joined_number(line):
    digits = "".join(_NUMBER.findall(line))
    return int(digits) if digits else 0


def parse_race(time_line, distance_line):
    """Read each line as one number, ignoring the spaces between its digits."""
    return Race(_joined_number(time_line), _joined_number(distance_line))


def _distance(hold, time):
    return hold * (time - hold)


def ways_to_beat_record(race):
    """Count hold times from 0 to ``time - 2`` that go further than the record."""
    time, record = race.time, race.distance_record
    last = time - 2
    if last < 0:
        return 0
    peak = time // 2
    if _distance(peak, time) <= record:
        return 0
    # The distance rises up to the peak, so the first winning hold can be bisected;
    # the winning holds then run symmetrically up to ``time - low``.
    low, high = 0, peak
    while low < high:
        middle = (low + high) // 2
        if _distance(middle, time) > record:
            high = middle
        else:
            low = middle + 1
    return max(0, min(time - low, last) - low + 1)


def ways_multiplied(lines):
    """Multiply together the ways to win each race listed on the first two lines."""
    return prod(ways_to_beat_record(race) for race in parse_races(lines[0], lines[1]))


def total_ways(lines):
    """Return the ways to win the single race spelled across the first two lines."""
    return ways_to_beat_record(parse_race(lines[0], lines[1]))


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = text.split("\n")
    return ways_multiplied(lines), total_ways(lines)