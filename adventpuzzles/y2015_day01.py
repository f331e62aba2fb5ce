"""Following parenthesis instructions up and down the floors of a building."""

_STEPS = {"(": 1, ")": -1}


def _floors(instructions):
    """Yield the floor reached after each instruction character."""
    floor = 0
    for char in instructions:
        floor += _STEPS.get(char, 0)
        yield floor


def final_floor(instructions):
    """Return the floor reached after following every instruction."""
    return sum(_STEPS.get(char, 0) for char in instructions)


def basement_position(instructions):
    """Return the 1-based position of the instruction that first reaches floor -1.

    If the basement is never entered, the final floor is returned instead.
    """
    floor = 0
    for position, floor in enumerate(_floors(instructions), start=1):
        if floor == -1:
            return position
    return floor


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    return final_floor(text), basement_position(text)