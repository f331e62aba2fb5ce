import pytest

from adventpuzzles.y2023_day11 import (
    Coordinates,
    expand_universe,
    find_expanded_path,
    find_shortest_path,
    mark_expansion,
    solve,
    sum_of_expanded_paths,
    sum_of_shortest_paths,
)

GRID = [
    "...#......",
    ".......#..",
    "#.........",
    "..........",
    "......#...",
    ".#........",
    ".........#",
    "..........",
    ".......#..",
    "#...#.....",
]

EXPANDED = [
    "....#........",
    ".........#...",
    "#............",
    ".............",
    ".............",
    "........#....",
    ".#...........",
    "............#",
    ".............",
    ".............",
    ".........#...",
    "#....#.......",
]

MARKED = [
    "...x#..x...x.",
    "...x...x.#.x.",
    "#..x...x...x.",
    "...x...x...x.",
    "xxxxxxxxxxxxx",
    "...x...x#..x.",
    ".#.x...x...x.",
    "...x...x...x#",
    "...x...x...x.",
    "xxxxxxxxxxxxx",
    "...x...x.#.x.",
    "#..x.#.x...x.",
]


def test_sum_of_shortest_paths():
    assert sum_of_shortest_paths(GRID) == 374


@pytest.mark.parametrize("factor, expected", [(10, 1030), (100, 8410)])
def test_sum_of_expanded_paths(factor, expected):
    assert sum_of_expanded_paths(GRID, factor) == expected


def test_expand_universe():
    assert expand_universe(GRID) == EXPANDED


def test_mark_expansion():
    assert mark_expansion(GRID) == MARKED


def test_expand_empty_universe_is_rejected():
    with pytest.raises(ValueError):
        expand_universe([])


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Coordinates(6, 1), Coordinates(11, 5), 9),
        (Coordinates(0, 4), Coordinates(10, 9), 15),
        (Coordinates(11, 0), Coordinates(11, 5), 5),
    ],
)
def test_find_shortest_path(a, b, expected):
    assert find_shortest_path(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Coordinates(6, 1), Coordinates(11, 5), 2_000_005),
        (Coordinates(0, 4), Coordinates(10, 9), 3_000_009),
        (Coordinates(11, 0), Coordinates(11, 5), 1_000_003),
    ],
)
def test_find_expanded_path(a, b, expected):
    assert find_expanded_path(a, b, MARKED, 1_000_000) == expected


def test_expansion_factor_two_matches_doubling():
    assert sum_of_expanded_paths(GRID, 2) == sum_of_shortest_paths(GRID)


def test_solve():
    part1, part2 = solve("\n".join(GRID) + "\n")
    assert part1 == 374
    assert part2 == sum_of_expanded_paths(GRID, 1_000_000)