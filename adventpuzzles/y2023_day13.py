"""Mirrors in ash and rock patterns, with and without a smudge."""

_ASH = "."
_ROCK = "#"
_NO_FORBIDDEN_SIZE = -1


def parse_patterns(lines):
    """Split lines into patterns at blank lines; empty blocks are dropped."""
    patterns = []
    current = []
    for line in lines:
        if line:
            current.append(line)
        elif current:
            patterns.append(current)
            current = []
    if current:
        patterns.append(current)
    return patterns


def is_reflection(part_a, part_b):
    """Return whether ``part_a`` mirrors ``part_b`` across the line between them."""
    reflected = min(len(part_a), len(part_b))
    if reflected == 0:
        return False
    return list(reversed(part_a))[:reflected] == list(part_b)[:reflected]


def _transpose(pattern):
    return ["".join(column) for column in zip(*pattern)]


def _mirror_positions(pattern):
    """Yield the number of lines before each line of reflection."""
    for index in range(len(pattern)):
        if is_reflection(pattern[:index], pattern[index:]):
            yield index


def reflection_size(pattern, forbidden_size=_NO_FORBIDDEN_SIZE):
    """Return 100 times the rows above a horizontal mirror, or the columns left of a vertical one.

    A size equal to ``forbidden_size`` is skipped; 0 means no mirror was found.
    """
    if not pattern:
        raise ValueError("empty pattern")
    for rows in _mirror_positions(pattern):
        if rows * 100 != forbidden_size:
            return rows * 100
    for columns in _mirror_positions(_transpose(pattern)):
        if columns != forbidden_size:
            return columns
    return 0


def _smudged(pattern, row, column):
    line = pattern[row]
    flipped = _ROCK if line[column] == _ASH else _ASH
    return [
        *pattern[:row],
        line[:column] + flipped + line[column + 1 :],
        *pattern[row + 1 :],
    ]


def smudged_reflection_size(pattern):
    """Return the size of the new mirror found by fixing exactly one smudge."""
    original = reflection_size(pattern)
    for row, line in enumerate(pattern):
        for column in range(len(line)):
            size = reflection_size(_smudged(pattern, row, column), original)
            if size != 0:
                return size
    return 0


def sum_of_reflections(lines):
    """Sum the reflection sizes of every pattern."""
    return sum(reflection_size(pattern) for pattern in parse_patterns(lines))


def sum_of_smudged_reflections(lines):
    """Sum the smudged reflection sizes of every pattern."""
    return sum(smudged_reflection_size(pattern) for pattern in parse_patterns(lines))


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = text.splitlines()
    return sum_of_reflections(lines), sum_of_smudged_reflections(lines)