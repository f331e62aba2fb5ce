"""Wrapping paper and ribbon needed for a list of presents."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Present:
    """A box-shaped present."""

    length: int
    width: int
    height: int


def parse_present(line):
    """Parse dimensions written as ``LxWxH``."""
    parts = line.split("x")
    if len(parts) < 3:
        raise ValueError(f"invalid present dimensions: {line!r}")
    length, width, height = (int(part) for part in parts[:3])
    return Present(length=length, width=width, height=height)


def wrapping_paper(present):
    """Return the surface area plus the area of the smallest side."""
    front = present.width * present.height
    side = present.length * present.height
    top = present.length * present.width
    return 2 * (front + side + top) + min(front, side, top)


def ribbon(present):
    """Return the smallest perimeter plus the volume for the bow."""
    front = 2 * (present.width + present.height)
    side = 2 * (present.length + present.height)
    top = 2 * (present.length + present.width)
    volume = present.width * present.height * present.length
    return min(front, side, top) + volume


def total_wrapping_paper(lines):
    """Return the paper needed for every present described in ``lines``."""
    return sum(wrapping_paper(parse_present(line)) for line in lines)


def total_ribbon(lines):
    """Return the ribbon needed for every present described in ``lines``."""
    return sum(ribbon(parse_present(line)) for line in lines)


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = [line for line in text.splitlines() if line]
    return total_wrapping_paper(lines), total_ribbon(lines)