"""Seed almanac: following seeds through chains of range conversions."""

import re
from dataclasses import dataclass, field

_NUMBER = re.compile(r"\d+", re.ASCII)
_TITLE = re.compile(r"(\w+)-to-(\w+) map:", re.ASCII)

_START = "seed"
_END = "location"
_NO_LOCATION = 9999999999


@dataclass(frozen=True)
class Conversion:
    """Numbers from ``source_start`` to ``source_end`` inclusive shift by ``difference``."""

    source_start: int
    source_end: int
    difference: int


@dataclass
class AlmanacMap:
    """The conversions from one category to the next."""

    source: str
    destination: str
    conversions: list = field(default_factory=list)

    def convert(self, number):
        """Apply the first conversion whose range holds ``number``."""
        for conversion in self.conversions:
            if conversion.source_start <= number <= conversion.source_end:
                return number + conversion.difference
        return number


@dataclass(frozen=True)
class SeedRange:
    """Seeds from ``start`` to ``finish``, both inclusive."""

    start: int
    finish: int


def _numbers(line):
    return [int(match) for match in _NUMBER.findall(line)]


def parse_conversion(line):
    """Parse ``destination source length`` into a :class:`Conversion`."""
    numbers = _numbers(line)
    if len(numbers) < 3:
        raise ValueError(f"invalid conversion: {line!r}")
    destination, source, length = numbers[:3]
    return Conversion(
        source_start=source,
        source_end=source + length - 1,
        difference=destination - source,
    )


def parse_map(lines):
    """Parse a titled block of conversions; later lines come first in the result."""
    if not lines:
        raise ValueError("empty almanac map")
    match = _TITLE.search(lines[0])
    if match is None:
        raise ValueError(f"invalid map title: {lines[0]!r}")
    conversions = [parse_conversion(line) for line in reversed(lines[1:])]
    return AlmanacMap(match[1], match[2], conversions)


def parse_almanac(lines):
    """Parse blank-line-terminated map blocks, keyed by source category.

    A block is only taken once the blank line that ends it is seen.
    """
    almanac = {}
    block = []
    for line in lines:
        if line:
            block.append(line)
            continue
        almanac_map = parse_map(block)
        almanac[almanac_map.source] = almanac_map
        block = []
    return almanac


def location_for_seed(seed, almanac):
    """Follow ``seed`` through the almanac until it becomes a location."""
    number = seed
    category = _START
    while category != _END:
        try:
            almanac_map = almanac[category]
        except KeyError:
            raise KeyError(f"no map from category {category!r}") from None
        number = almanac_map.convert(number)
        category = almanac_map.destination
    return number


def lowest_location_number(lines):
    """Return the lowest location of the seeds listed on the first line."""
    seeds = _numbers(lines[0])
    if not seeds:
        raise ValueError("no seeds listed")
    almanac = parse_almanac(lines[2:])
    return min(location_for_seed(seed, almanac) for seed in seeds)


def _parse_seed_ranges(line):
    numbers = _numbers(line)
    if len(numbers) % 2:
        raise ValueError(f"seed ranges need pairs of numbers: {line!r}")
    return [
        SeedRange(start, start + length)
        for start, length in zip(numbers[::2], numbers[1::2])
    ]


def lowest_location_for_range(seed_range, almanac):
    """Return the lowest location of every seed in ``seed_range``."""
    return min(
        location_for_seed(seed, almanac)
        for seed in range(seed_range.start, seed_range.finish + 1)
    )


def lowest_location_for_ranges(lines):
    """Return the lowest location when the first line lists seed ranges."""
    seed_ranges = _parse_seed_ranges(lines[0])
    almanac = parse_almanac(lines[2:])
    return min(
        [_NO_LOCATION]
        + [lowest_location_for_range(seed_range, almanac) for seed_range in seed_ranges]
    )


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = text.split("\n")
    if lines[-1]:
        lines.append("")
    return lowest_location_number(lines), lowest_location_for_ranges(lines)