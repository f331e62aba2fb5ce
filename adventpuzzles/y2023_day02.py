"""Cube games: which are possible and how many cubes each needs."""

import re

CUBE_LIMITS = {"red": 12, "green": 13, "blue": 14}

_GAME = re.compile(r"Game (\d+): (.*)")
_CUBE = re.compile(r"(\d+) (red|green|blue)")


def _parse_game(line):
    match = _GAME.search(line)
    if match is None:
        raise ValueError(f"invalid game: {line!r}")
    return int(match[1]), match[2]


def _draws(description):
    """Yield ``(colour, count)`` for every cube count in a game description."""
    for round_ in description.split(";"):
        for cube_count in round_.split(", "):
            match = _CUBE.search(cube_count)
            if match is None:
                raise ValueError(f"invalid cube count: {cube_count!r}")
            yield match[2], int(match[1])


def game_possible(description):
    """Return whether no draw exceeds the cubes available of its colour."""
    return all(count <= CUBE_LIMITS[colour] for colour, count in _draws(description))


def possible_games(games):
    """Return the ids of the possible games, in input order."""
    return [
        game_id
        for game_id, description in map(_parse_game, games)
        if game_possible(description)
    ]


def possible_games_sum(games):
    """Sum the ids of the possible games."""
    return sum(possible_games(games))


def mins_for_game(description):
    """Return the fewest cubes of each colour that make the game possible."""
    minimums = dict.fromkeys(("red", "green", "blue"), 0)
    for colour, count in _draws(description):
        minimums[colour] = max(minimums[colour], count)
    return minimums


def power_for_game(description):
    """Return the product of the minimum cube counts."""
    minimums = mins_for_game(description)
    return minimums["red"] * minimums["green"] * minimums["blue"]


def cube_power_sum(games):
    """Sum the powers of all games."""
    return sum(power_for_game(description) for _, description in map(_parse_game, games))


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    games = [line for line in text.splitlines() if line]
    return possible_games_sum(games), cube_power_sum(games)