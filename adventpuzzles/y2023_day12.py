"""Hot springs: counting the arrangements that match damaged-spring groups."""

from dataclasses import dataclass

_DAMAGED = "#"
_OPERATIONAL = "."
_UNKNOWN = "?"


@dataclass(frozen=True)
class Row:
    """A row of spring states and the sizes of its damaged groups."""

    springs: str
    groups: tuple


def _parse_groups(text):
    return tuple(int(group) for group in text.split(","))


def parse_row(line):
    """Parse ``springs groups`` such as ``???.### 1,1,3``."""
    fields = line.split()
    if len(fields) < 2:
        raise ValueError(f"invalid row: {line!r}")
    return Row(fields[0], _parse_groups(fields[1]))


def generate_permutations(springs):
    """Return every way of replacing each ``?`` with ``#`` or ``.``.

    For each arrangement of the tail, the ``#`` choice comes before the ``.`` one.
    """
    if not springs:
        raise ValueError("no springs given")
    head, tail = springs[0], springs[1:]
    choices = (_DAMAGED, _OPERATIONAL) if head == _UNKNOWN else (head,)
    if not tail:
        return list(choices)
    return [
        choice + tail_permutation
        for tail_permutation in generate_permutations(tail)
        for choice in choices
    ]


def _count_groups(springs):
    """Return the lengths of the damaged runs; ``?`` neither extends nor ends a run."""
    groups = []
    current = 0
    for spring in springs:
        if spring == _DAMAGED:
            current += 1
        elif spring == _OPERATIONAL and current > 0:
            groups.append(current)
            current = 0
    if current > 0:
        groups.append(current)
    return tuple(groups)


def is_valid_row(row):
    """Return whether the damaged runs of the springs match the row's groups."""
    return _count_groups(row.springs) == tuple(row.groups)


def possible_arrangements(row):
    """Count the arrangements of the unknown springs that fit the groups."""
    return sum(
        1
        for permutation in generate_permutations(row.springs)
        if is_valid_row(Row(permutation, row.groups))
    )


def sum_of_arrangements(lines):
    """Sum the possible arrangements of every row."""
    return sum(possible_arrangements(parse_row(line)) for line in lines)


def solve(text):
    """Return the answer for the given puzzle input."""
    lines = [line for line in text.splitlines() if line]
    return (sum_of_arrangements(lines),)